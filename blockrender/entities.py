"""Entity escaping and numeric entity decoding."""

from __future__ import annotations

import re
from typing import List, Tuple

from .errors import EntityDecodeError

_BARE_AMPERSAND = re.compile(r"&(?!#?\w+;)")

_REPLACEMENTS = (
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

_MAX_CODE_POINT = 0x10FFFF

_DIGITS = {16: re.compile(r"[0-9A-Fa-f]+"), 10: re.compile(r"[0-9]+")}


def escape(text: str, encode: bool = False) -> str:
    """Replace ``<``, ``>`` and quotes with entities.

    With ``encode`` every ampersand is converted too, otherwise only the ones
    that do not already start an entity reference.
    """
    if encode:
        text = text.replace("&", "&amp;")
    else:
        text = _BARE_AMPERSAND.sub("&amp;", text)
    for char, entity in _REPLACEMENTS:
        text = text.replace(char, entity)
    return text


def _parse_numeric(text: str, start: int, base: int) -> Tuple[int, str]:
    end = text.find(";", start)
    if end < 0:
        raise EntityDecodeError(f"unterminated numeric entity at offset {start}")
    digits = text[start:end]
    if not _DIGITS[base].fullmatch(digits):
        raise EntityDecodeError(f"invalid base-{base} entity {digits!r} at offset {start}")
    code_point = int(digits, base)
    if code_point > _MAX_CODE_POINT:
        raise EntityDecodeError(f"code point {code_point:#x} is out of range")
    if 0xD800 <= code_point <= 0xDFFF:
        raise EntityDecodeError(f"code point {code_point:#x} is a surrogate")
    return end + 1, chr(code_point)


def unescape(text: str) -> str:
    """Convert ``&colon;`` and numeric entity references to characters."""
    result: List[str] = []
    pos = 0
    length = len(text)
    while pos < length:
        if text.startswith("&colon;", pos):
            result.append(":")
            pos += len("&colon;")
        elif text.startswith("&#x", pos):
            pos, char = _parse_numeric(text, pos + 3, 16)
            result.append(char)
        elif text.startswith("&#", pos):
            pos, char = _parse_numeric(text, pos + 2, 10)
            result.append(char)
        else:
            result.append(text[pos])
            pos += 1
    return "".join(result)


__all__ = ["escape", "unescape"]
