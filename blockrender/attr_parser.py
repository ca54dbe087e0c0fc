"""Parser for the compact attribute-list syntax (``{: .cls #id key=value}``)."""

from __future__ import annotations

import re
from typing import Dict, List, Protocol, Tuple

AttrMap = Dict[str, List[str]]

_TOKEN = re.compile(
    r"""
    \.(?P<cls>[\w-]+)
    | \#(?P<id>[\w:.-]+)
    | (?P<name>[\w-]+)=(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"']+))
    """,
    re.VERBOSE,
)
_SPACE = re.compile(r"\s+")
_JUNK = re.compile(r"\S+")


class AttributeListParser(Protocol):
    """Anything that turns raw attribute-list text into an ordered mapping."""

    def parse(self, raw: str) -> Tuple[AttrMap, List[str]]:
        ...


def _strip_braces(raw: str) -> str:
    text = raw.strip()
    if text.startswith("{:") and text.endswith("}"):
        text = text[2:-1]
    return text.strip()


class AttrListParser:
    """Default attribute-list parser.

    Returns the parsed attributes in first-seen order together with one
    diagnostic per token that could not be read.
    """

    def parse(self, raw: str) -> Tuple[AttrMap, List[str]]:
        text = _strip_braces(raw)
        attrs: AttrMap = {}
        errors: List[str] = []
        pos = 0
        while pos < len(text):
            space = _SPACE.match(text, pos)
            if space:
                pos = space.end()
                continue
            match = _TOKEN.match(text, pos)
            if match and (match.end() == len(text) or text[match.end()].isspace()):
                name, value = _token_pair(match)
                attrs.setdefault(name, []).append(value)
                pos = match.end()
                continue
            junk = _JUNK.match(text, pos)
            errors.append(f"illegal attribute token {junk.group(0)!r}")
            pos = junk.end()
        return attrs, errors


def _token_pair(match: re.Match) -> Tuple[str, str]:
    if match.group("cls") is not None:
        return "class", match.group("cls")
    if match.group("id") is not None:
        return "id", match.group("id")
    values = (match.group("dq"), match.group("sq"), match.group("bare"))
    return match.group("name"), next(value for value in values if value is not None)


__all__ = ["AttrListParser", "AttrMap", "AttributeListParser"]
