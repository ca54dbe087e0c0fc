"""Fatal faults raised while rendering a block tree."""

from __future__ import annotations


class RenderError(Exception):
    """Base class for faults that abort a render call."""


class UnknownBlockError(RenderError):
    """A value that is not a known block variant reached the dispatcher."""

    def __init__(self, block: object) -> None:
        super().__init__(f"cannot render block of type {type(block).__name__}")
        self.block = block


class PluginError(RenderError):
    """A plugin handler failed while rendering its lines."""


class EntityDecodeError(RenderError, ValueError):
    """A numeric entity reference could not be decoded."""


class AttributeListError(RenderError, ValueError):
    """An attribute list contained tokens the parser could not read."""

    def __init__(self, raw: str, problems: list[str]) -> None:
        detail = "; ".join(problems)
        super().__init__(f"illegal attributes in {raw!r}: {detail}")
        self.raw = raw
        self.problems = problems


__all__ = [
    "AttributeListError",
    "EntityDecodeError",
    "PluginError",
    "RenderError",
    "UnknownBlockError",
]
