"""Utility helpers for document IO and logging."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from .models import Document, Message


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def read_data(path: Path) -> Any:
    """Read JSON or YAML depending on the file suffix."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    return json.loads(text)


def load_document(path: Path) -> Document:
    """Load a block document; a bare list is taken as the block sequence."""

    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")
    try:
        payload = read_data(path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Unreadable document {path}: {exc}") from exc
    if isinstance(payload, list):
        payload = {"blocks": payload}
    try:
        return Document.model_validate(payload or {})
    except ValidationError as exc:
        raise SystemExit(f"Invalid document {path}: {exc}") from exc


def write_messages_json(path: Path, messages: Iterable[Message]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [message.model_dump() for message in messages]
    path.write_text(stable_json_dumps(payload), encoding="utf-8")


def format_message(message: Message) -> str:
    return f"[{message.severity}] line {message.line}: {message.text}"


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = [
    "format_message",
    "load_document",
    "read_data",
    "stable_json_dumps",
    "warn",
    "write_messages_json",
]
