"""Plugin handler capability and lookup."""

from __future__ import annotations

import importlib
import inspect
from typing import TYPE_CHECKING, Any, List, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from .models import Message


class PluginHandler(Protocol):
    """Renders the raw lines of a plugin block to HTML."""

    def render(self, lines: Sequence[str]) -> Tuple[str, List["Message"]]:
        ...


def _import_target(target: str) -> Any:
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise ValueError(f"plugin handler must look like 'module:attribute', got {target!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(f"cannot import plugin module {module_name!r}: {exc}") from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ValueError(f"{module_name!r} has no attribute {attr!r}") from exc


def resolve_handler(value: Any) -> Any:
    """Return a handler object, importing and instantiating string references."""
    handler = _import_target(value) if isinstance(value, str) else value
    if inspect.isclass(handler):
        handler = handler()
    if not callable(getattr(handler, "render", None)):
        raise ValueError(f"plugin handler {handler!r} has no render(lines) method")
    return handler


__all__ = ["PluginHandler", "resolve_handler"]
