"""Wrap rendered fragments in a standalone HTML page."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TEMPLATES_DIR = Path(__file__).parent / "templates"


def page_env() -> Environment:
    return Environment(
        loader=FileSystemLoader([TEMPLATES_DIR]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_page(body: str, *, title: str, lang: str = "en") -> str:
    """Place ``body`` unescaped inside the document template; ``title`` is escaped."""

    template = page_env().get_template("document.html.jinja")
    return template.render(body=body, title=title, lang=lang)


__all__ = ["page_env", "render_page"]
