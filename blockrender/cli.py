"""Command-line interface for blockrender."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from .context import Context, RenderOptions, load_options
from .entities import escape, unescape
from .errors import EntityDecodeError, RenderError
from .html_renderer import render
from .io_utils import format_message, load_document, warn, write_messages_json
from .page import render_page


def _load_render_options(args: argparse.Namespace) -> RenderOptions:
    options = load_options(Path(args.config)) if args.config else RenderOptions()
    if args.parallel:
        options = options.model_copy(update={"dispatch_strategy": "parallel"})
    return options


def _handle_render(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    document = load_document(input_path)
    context = Context(options=_load_render_options(args))

    try:
        html, messages = render(document.blocks, context)
    except RenderError as exc:
        raise SystemExit(f"Failed to render {input_path}: {exc}") from exc

    if args.standalone:
        html = render_page(html, title=args.title or input_path.stem)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    else:
        sys.stdout.write(html)

    for message in messages:
        warn(format_message(message))
    if args.messages_json:
        write_messages_json(Path(args.messages_json), messages)

    if any(message.severity == "error" for message in messages):
        raise SystemExit(1)


def _handle_escape(args: argparse.Namespace) -> None:
    print(escape(args.text, args.encode))


def _handle_unescape(args: argparse.Namespace) -> None:
    try:
        print(unescape(args.text))
    except EntityDecodeError as exc:
        raise SystemExit(f"Cannot decode {args.text!r}: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockrender",
        description="Render parsed Markdown block trees to HTML.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a block document to HTML.",
        description=(
            "Render a JSON or YAML block document to HTML and report any "
            "diagnostic messages on stderr."
        ),
    )
    render_parser.add_argument(
        "--input",
        required=True,
        help="Path to the block document (.json, .yaml or .yml).",
    )
    render_parser.add_argument(
        "--config",
        help="Optional YAML file with render options.",
    )
    render_parser.add_argument(
        "--output",
        help="File to write HTML to; stdout when omitted.",
    )
    render_parser.add_argument(
        "--standalone",
        action="store_true",
        help="Wrap the fragment in a complete HTML page.",
    )
    render_parser.add_argument(
        "--title",
        help="Page title used with --standalone (defaults to the input file stem).",
    )
    render_parser.add_argument(
        "--messages-json",
        dest="messages_json",
        help="Also write diagnostic messages to this JSON file.",
    )
    render_parser.add_argument(
        "--parallel",
        action="store_true",
        help="Render sibling blocks on a thread pool.",
    )
    render_parser.set_defaults(func=_handle_render)

    escape_parser = subparsers.add_parser(
        "escape",
        help="Escape text for inclusion in HTML.",
    )
    escape_parser.add_argument("text", help="Text to escape.")
    escape_parser.add_argument(
        "--encode",
        action="store_true",
        help="Convert every ampersand, including ones that start an entity.",
    )
    escape_parser.set_defaults(func=_handle_escape)

    unescape_parser = subparsers.add_parser(
        "unescape",
        help="Decode &colon; and numeric entity references.",
    )
    unescape_parser.add_argument("text", help="Text to decode.")
    unescape_parser.set_defaults(func=_handle_unescape)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
