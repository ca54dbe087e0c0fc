"""Inline conversion of raw text spans into formatted markup."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Mapping, Optional, Protocol, Sequence, Union

from . import hooks
from .entities import escape

if TYPE_CHECKING:
    from .context import Context

TextSpans = Union[str, Sequence[str]]

_SPAN = re.compile(
    r"""
    (?P<ticks>`+)(?P<code>.+?)(?P=ticks)
    | (?P<tag></?[A-Za-z][^<>]*>)
    | !\[(?P<alt>[^\]]*)\]\((?P<src>[^\s)]+)(?:\s+"(?P<img_title>[^"]*)")?\)
    | \[\^(?P<fn>[^\]]+)\]
    | \[(?P<label>[^\]]+)\]\((?P<href>[^\s)]+)(?:\s+"(?P<title>[^"]*)")?\)
    """,
    re.VERBOSE,
)
_STRONG = re.compile(r"\*\*(.+?)\*\*|(?<!\w)__(.+?)__(?!\w)")
_STRIKE = re.compile(r"~~(.+?)~~")
_EM = re.compile(r"\*(.+?)\*|(?<!\w)_(.+?)_(?!\w)")
_HARD_BREAK = re.compile(r" {2,}$")


class InlineConverter(Protocol):
    """Turns raw text spans into inline markup."""

    def convert(self, text: TextSpans, context: "Context") -> str:
        ...


def _first(match: re.Match) -> str:
    return next(group for group in match.groups() if group is not None)


class SimpleInlineConverter:
    """Small inline converter covering the common span types.

    Code spans, raw inline tags, images, links and footnote references are
    recognised first; the text between them is escaped and then gets
    strong, strikethrough and emphasis markup. A line ending in two or more
    spaces is followed by a hard break.
    """

    def __init__(self, footnotes: Optional[Mapping[str, int]] = None) -> None:
        self.footnotes = dict(footnotes or {})

    def convert(self, text: TextSpans, context: "Context") -> str:
        lines = text.split("\n") if isinstance(text, str) else list(text)
        converted: List[str] = []
        last = len(lines) - 1
        for index, line in enumerate(lines):
            if index < last and _HARD_BREAK.search(line):
                converted.append(self._line(line.rstrip(" ")) + hooks.br())
            else:
                converted.append(self._line(line))
        return "\n".join(converted)

    def _line(self, line: str) -> str:
        parts: List[str] = []
        pos = 0
        for match in _SPAN.finditer(line):
            parts.append(self._text(line[pos : match.start()]))
            parts.append(self._span(match))
            pos = match.end()
        parts.append(self._text(line[pos:]))
        return "".join(parts)

    def _span(self, match: re.Match) -> str:
        if match.group("code") is not None:
            return hooks.codespan(escape(match.group("code").strip(), True))
        if match.group("tag") is not None:
            return match.group("tag")
        if match.group("src") is not None:
            title = match.group("img_title")
            return hooks.image(
                escape(match.group("src")),
                escape(match.group("alt")),
                escape(title) if title is not None else None,
            )
        if match.group("fn") is not None:
            number = self.footnotes.get(match.group("fn"))
            if number is None:
                return self._text(match.group(0))
            return hooks.footnote_link(f"fn:{number}", f"fnref:{number}", number)
        title = match.group("title")
        return hooks.link(
            escape(match.group("href")),
            self._text(match.group("label")),
            escape(title) if title is not None else None,
        )

    def _text(self, text: str) -> str:
        if not text:
            return ""
        text = escape(text)
        text = _STRONG.sub(lambda m: hooks.strong(_first(m)), text)
        text = _STRIKE.sub(lambda m: hooks.strikethrough(m.group(1)), text)
        return _EM.sub(lambda m: hooks.em(_first(m)), text)


__all__ = ["InlineConverter", "SimpleInlineConverter", "TextSpans"]
