"""Render options and the immutable context shared by one render call."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .attr_parser import AttributeListParser, AttrListParser
from .inline import InlineConverter, SimpleInlineConverter, TextSpans
from .strategies import Mapper, strategy_for


class RenderOptions(BaseModel):
    """Formatting and dispatch options for a render call."""

    code_class_prefix: Optional[str] = Field(
        None,
        description=(
            "Space separated prefixes; each one yields an extra language class "
            "on fenced code blocks."
        ),
    )
    dispatch_strategy: Literal["sequential", "parallel"] = Field(
        "sequential", description="How sibling blocks are rendered."
    )
    max_workers: Optional[int] = Field(
        None, ge=1, description="Thread count for the parallel strategy."
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


def load_options(path: Path) -> RenderOptions:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of render options.")
    try:
        return RenderOptions.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid render options in {path}: {exc}") from exc


@dataclass(frozen=True)
class Context:
    """Everything a renderer may consult; never mutated while rendering."""

    options: RenderOptions = field(default_factory=RenderOptions)
    inline: InlineConverter = field(default_factory=SimpleInlineConverter)
    attr_parser: AttributeListParser = field(default_factory=AttrListParser)
    mapper: Optional[Mapper] = None

    @property
    def dispatch(self) -> Mapper:
        """The injected mapper, or the strategy named in the options."""

        if self.mapper is not None:
            return self.mapper
        return strategy_for(self.options.dispatch_strategy, self.options.max_workers)

    def convert(self, text: TextSpans) -> str:
        return self.inline.convert(text, self)


__all__ = ["Context", "RenderOptions", "load_options"]
