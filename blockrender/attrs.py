"""Merge attribute sets and splice them into already rendered markup."""

from __future__ import annotations

import re
from typing import Dict, List, Mapping, Optional, Sequence, Union

from .attr_parser import AttributeListParser, AttrListParser, AttrMap
from .errors import AttributeListError

AttrSpec = Union[None, str, Mapping[str, Sequence[str]]]

# First closing boundary of the outermost tag: optional whitespace, optional "/", ">".
_TAG_CLOSE = re.compile(r"\s*/?>")

_DEFAULT_PARSER = AttrListParser()


def parse_attrs(raw: str, parser: Optional[AttributeListParser] = None) -> AttrMap:
    attrs, errors = (parser or _DEFAULT_PARSER).parse(raw)
    if errors:
        raise AttributeListError(raw, errors)
    return attrs


def merge_attrs(
    attrs: AttrSpec,
    defaults: Optional[Mapping[str, Sequence[str]]] = None,
    parser: Optional[AttributeListParser] = None,
) -> Dict[str, List[str]]:
    """Merge ``defaults`` into ``attrs``; a name present in both keeps the default."""
    if isinstance(attrs, str):
        attrs = parse_attrs(attrs, parser)
    merged: Dict[str, List[str]] = {name: list(values) for name, values in (attrs or {}).items()}
    for name, values in (defaults or {}).items():
        merged[name] = list(values)
    return merged


def attrs_to_string(attrs: Mapping[str, Sequence[str]]) -> str:
    return " ".join(f'{name}="{" ".join(values)}"' for name, values in attrs.items())


def add_to(attrs: str, markup: str) -> str:
    """Insert serialized attributes before the first tag-closing boundary."""
    if not attrs:
        return markup
    return _TAG_CLOSE.sub(lambda match: f" {attrs}{match.group(0)}", markup, count=1)


def add_attrs(
    markup: str,
    attrs: AttrSpec,
    defaults: Optional[Mapping[str, Sequence[str]]] = None,
    parser: Optional[AttributeListParser] = None,
) -> str:
    """Add explicit and default attributes to the outer tag of ``markup``."""
    if attrs is None and not defaults:
        return markup
    return add_to(attrs_to_string(merge_attrs(attrs, defaults, parser)), markup)


__all__ = ["AttrSpec", "add_attrs", "add_to", "attrs_to_string", "merge_attrs", "parse_attrs"]
