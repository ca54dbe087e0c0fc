"""Render a block tree to HTML together with its diagnostic messages."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from .attrs import add_attrs
from .context import Context
from .entities import escape
from .errors import PluginError, RenderError, UnknownBlockError
from .models import (
    Block,
    BlockQuote,
    Code,
    FnDef,
    FnList,
    Heading,
    Html,
    HtmlOther,
    Ial,
    IdDef,
    ListBlock,
    ListItem,
    Message,
    Para,
    Plugin,
    Ruler,
    Table,
)
from .plugins import PluginHandler

Rendered = Tuple[str, List[Message]]

RULER_CLASSES = {"-": "thin", "_": "medium", "*": "thick"}

_PARA_TAG = re.compile(r"</?p(\s[^>]*)?>")


def render(blocks: Sequence[Block], context: Context) -> Rendered:
    """Render sibling blocks with the context's strategy, keeping document order."""

    results = context.dispatch(
        list(enumerate(blocks)),
        lambda pair: (pair[0], render_block(pair[1], context)),
    )
    ordered = sorted(results, key=lambda result: result[0])
    html = "".join(fragment for _, (fragment, _) in ordered)
    messages = [message for _, (_, batch) in ordered for message in batch]
    return html, messages


def render_block(block: Block, context: Context) -> Rendered:
    parser = context.attr_parser

    if isinstance(block, Para):
        html = f"<p>{context.convert(block.lines)}</p>\n"
        return add_attrs(html, block.attrs, parser=parser), []

    if isinstance(block, (Html, HtmlOther)):
        return "\n".join(block.html), []

    if isinstance(block, Ruler):
        defaults = {"class": [RULER_CLASSES[block.type]]}
        return add_attrs("<hr/>\n", block.attrs, defaults, parser=parser), []

    if isinstance(block, Heading):
        html = f"<h{block.level}>{context.convert(block.content)}</h{block.level}>\n"
        return add_attrs(html, block.attrs, parser=parser), []

    if isinstance(block, BlockQuote):
        body, messages = render(block.blocks, context)
        return add_attrs(f"<blockquote>{body}</blockquote>\n", block.attrs, parser=parser), messages

    if isinstance(block, Table):
        return _render_table(block, context)

    if isinstance(block, Code):
        return _render_code(block, context), []

    if isinstance(block, ListBlock):
        content, messages = render(block.blocks, context)
        html = f"<{block.type}>\n{content}</{block.type}>\n"
        return add_attrs(html, block.attrs, parser=parser), messages

    if isinstance(block, ListItem):
        content, messages = render(block.blocks, context)
        if len(block.blocks) == 1 and not block.spaced:
            content = _PARA_TAG.sub("", content)
        return add_attrs(f"<li>{content}</li>\n", block.attrs, parser=parser), messages

    if isinstance(block, FnList):
        return _render_footnotes(block, context)

    if isinstance(block, Ial):
        return f"<p>{context.convert(['{:' + block.content + '}'])}</p>\n", []

    if isinstance(block, IdDef):
        return "", []

    if isinstance(block, Plugin):
        return _render_plugin(block)

    raise UnknownBlockError(block)


########
# Code #
########


def code_classes(language: str, prefix: Optional[str]) -> str:
    return " ".join(f"{pfx}{language}" for pfx in ["", *(prefix or "").split()])


def _render_code(block: Code, context: Context) -> str:
    css = ""
    if block.language:
        css = f' class="{code_classes(block.language, context.options.code_class_prefix)}"'
    lines = "\n".join(escape(line, True) for line in block.lines)
    html = f"<pre><code{css}>{lines}</code></pre>\n"
    return add_attrs(html, block.attrs, parser=context.attr_parser)


#########
# Table #
#########


def _cell_style(aligns: Sequence[Optional[str]], index: int) -> str:
    align = aligns[index] if index < len(aligns) else None
    return f' style="text-align: {align}"' if align else ""


def add_tds(context: Context, row: Sequence[str], tag: str, aligns: Sequence[Optional[str]] = ()) -> str:
    return "".join(
        f"<{tag}{_cell_style(aligns, index)}>{context.convert(cell)}</{tag}>"
        for index, cell in enumerate(row)
    )


def add_table_rows(
    context: Context, rows: Sequence[Sequence[str]], tag: str, aligns: Sequence[Optional[str]] = ()
) -> str:
    return "".join(f"<tr>\n{add_tds(context, row, tag, aligns)}\n</tr>\n" for row in rows)


def _table_messages(table: Table) -> List[Message]:
    columns = len(table.alignments)
    labelled = [(f"body row {number}", row) for number, row in enumerate(table.rows, start=1)]
    if table.header is not None:
        labelled.insert(0, ("header row", table.header))
    return [
        Message(
            severity="warning",
            line=table.lnb,
            text=f"table {label} has {len(row)} cells, expected {columns}",
        )
        for label, row in labelled
        if len(row) != columns
    ]


def _render_table(table: Table, context: Context) -> Rendered:
    aligns = table.alignments
    parts = [
        add_attrs("<table>\n", table.attrs, parser=context.attr_parser),
        "<colgroup>\n",
        "<col>\n" * len(aligns),
        "</colgroup>\n",
    ]
    if table.header is not None:
        parts += ["<thead>\n", add_table_rows(context, [table.header], "th", aligns), "</thead>\n"]
    parts += [add_table_rows(context, table.rows, "td", aligns), "</table>\n"]
    return "".join(parts), _table_messages(table)


#############
# Footnotes #
#############


def footnote_backlink(number: int) -> str:
    return (
        f'<a href="#fnref:{number}" title="return to article" '
        f'class="reversefootnote">&#x21A9;</a>'
    )


def append_footnote_link(note: FnDef) -> List[Block]:
    """Attach the return link to the last paragraph, or add a paragraph for it."""

    link = footnote_backlink(note.number)
    blocks = list(note.blocks)
    last = blocks[-1] if blocks else None
    if isinstance(last, Para) and last.lines:
        lines = [*last.lines[:-1], f"{last.lines[-1]}&nbsp;{link}"]
        blocks[-1] = last.model_copy(update={"lines": lines})
    else:
        blocks.append(Para(lines=[link]))
    return blocks


def _render_footnotes(fn_list: FnList, context: Context) -> Rendered:
    items = [
        ListItem(type="ol", attrs=f"#fn:{note.number}", blocks=append_footnote_link(note))
        for note in fn_list.blocks
    ]
    html, messages = render_block(ListBlock(type="ol", blocks=items), context)
    return "\n".join(['<div class="footnotes">', "<hr>", html, "</div>"]), messages


###########
# Plugins #
###########


def _render_plugin(block: Plugin) -> Rendered:
    handler: PluginHandler = block.handler
    try:
        html, messages = handler.render(block.lines)
    except RenderError:
        raise
    except Exception as exc:
        raise PluginError(f"plugin {handler!r} failed: {exc}") from exc
    return html, list(messages)


__all__ = [
    "RULER_CLASSES",
    "add_table_rows",
    "add_tds",
    "append_footnote_link",
    "code_classes",
    "footnote_backlink",
    "render",
    "render_block",
]
