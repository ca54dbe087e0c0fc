"""Markup templates the inline converter calls back into."""

from __future__ import annotations

from typing import Optional


def br() -> str:
    return "<br/>"


def codespan(text: str) -> str:
    return f'<code class="inline">{text}</code>'


def em(text: str) -> str:
    return f"<em>{text}</em>"


def strong(text: str) -> str:
    return f"<strong>{text}</strong>"


def strikethrough(text: str) -> str:
    return f"<del>{text}</del>"


def link(url: str, text: str, title: Optional[str] = None) -> str:
    if title is None:
        return f'<a href="{url}">{text}</a>'
    return f'<a href="{url}" title="{title}">{text}</a>'


def image(path: str, alt: str, title: Optional[str] = None) -> str:
    if title is None:
        return f'<img src="{path}" alt="{alt}"/>'
    return f'<img src="{path}" alt="{alt}" title="{title}"/>'


def footnote_link(ref: str, backref: str, number: int) -> str:
    return f'<a href="#{ref}" id="{backref}" class="footnote" title="see footnote">{number}</a>'


__all__ = [
    "br",
    "codespan",
    "em",
    "footnote_link",
    "image",
    "link",
    "strikethrough",
    "strong",
]
