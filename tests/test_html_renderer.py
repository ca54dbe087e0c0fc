from typing import List, Sequence, Tuple

import pytest

from blockrender.context import Context, RenderOptions
from blockrender.errors import AttributeListError, PluginError, RenderError, UnknownBlockError
from blockrender.html_renderer import code_classes, render, render_block
from blockrender.models import (
    BlockQuote,
    Code,
    Heading,
    Html,
    HtmlOther,
    Ial,
    IdDef,
    Message,
    Para,
    Plugin,
    Ruler,
    Table,
)


class EchoHandler:
    def render(self, lines: Sequence[str]) -> Tuple[str, List[Message]]:
        return "<pre>" + "|".join(lines) + "</pre>\n", [Message(severity="info", text="echo")]


class BrokenHandler:
    def render(self, lines: Sequence[str]) -> Tuple[str, List[Message]]:
        raise RuntimeError("boom")


@pytest.fixture()
def ctx() -> Context:
    return Context()


def test_paragraph_is_inline_converted(ctx: Context) -> None:
    assert render([Para(lines=["Hello *world*"])], ctx) == ("<p>Hello <em>world</em></p>\n", [])


def test_paragraph_attributes(ctx: Context) -> None:
    html, _ = render([Para(lines=["Hello"], attrs=".lead")], ctx)

    assert html == '<p class="lead">Hello</p>\n'


def test_heading(ctx: Context) -> None:
    assert render_block(Heading(level=2, content="Title"), ctx) == ("<h2>Title</h2>\n", [])
    html, _ = render_block(Heading(level=3, content="Top", attrs="#top"), ctx)
    assert html == '<h3 id="top">Top</h3>\n'


@pytest.mark.parametrize(
    ("ruler_type", "css"), [("-", "thin"), ("_", "medium"), ("*", "thick")]
)
def test_ruler_default_classes(ctx: Context, ruler_type: str, css: str) -> None:
    assert render_block(Ruler(type=ruler_type), ctx) == (f'<hr class="{css}"/>\n', [])


def test_ruler_class_overrides_explicit_class(ctx: Context) -> None:
    html, _ = render_block(Ruler(type="-", attrs={"class": ["custom"], "id": ["r"]}), ctx)

    assert html == '<hr class="thin" id="r"/>\n'


def test_code_is_escaped_aggressively(ctx: Context) -> None:
    block = Code(lines=["a < b && c", "&amp;"], language="python")

    html, messages = render_block(block, ctx)

    assert html == '<pre><code class="python">a &lt; b &amp;&amp; c\n&amp;amp;</code></pre>\n'
    assert messages == []


def test_code_class_prefix_from_options() -> None:
    ctx = Context(options=RenderOptions(code_class_prefix="lang- language-"))

    html, _ = render_block(Code(lines=["x"], language="elixir"), ctx)

    assert html.startswith('<pre><code class="elixir lang-elixir language-elixir">')


def test_code_without_language_and_with_attrs(ctx: Context) -> None:
    assert render_block(Code(lines=["x"]), ctx)[0] == "<pre><code>x</code></pre>\n"
    html, _ = render_block(Code(lines=["x"], attrs=".hl"), ctx)
    assert html == '<pre class="hl"><code>x</code></pre>\n'


def test_code_classes() -> None:
    assert code_classes("py", None) == "py"
    assert code_classes("py", "") == "py"
    assert code_classes("py", "lang-") == "py lang-py"


def test_html_blocks_pass_through(ctx: Context) -> None:
    lines = ["<div>", "  <b>raw & bold</b>", "</div>"]

    assert render_block(Html(html=lines), ctx) == ("<div>\n  <b>raw & bold</b>\n</div>", [])
    assert render_block(HtmlOther(html=["<!-- c -->"], attrs=".x"), ctx) == ("<!-- c -->", [])


def test_isolated_ial_becomes_visible_paragraph(ctx: Context) -> None:
    assert render_block(Ial(content=".foo"), ctx) == ("<p>{:.foo}</p>\n", [])


def test_id_definition_renders_nothing(ctx: Context) -> None:
    assert render_block(IdDef(id="x", url="http://example.com"), ctx) == ("", [])


def test_blockquote_recurses(ctx: Context) -> None:
    block = BlockQuote(blocks=[Para(lines=["q"]), Ruler(type="*")], attrs="#quote")

    html, _ = render_block(block, ctx)

    assert html == '<blockquote id="quote"><p>q</p>\n<hr class="thick"/>\n</blockquote>\n'


def test_plugin_delegates_to_handler(ctx: Context) -> None:
    block = Plugin(lines=["a", "b"], handler=EchoHandler())

    assert render_block(block, ctx) == ("<pre>a|b</pre>\n", [Message(severity="info", text="echo")])


def test_plugin_failure_aborts_render(ctx: Context) -> None:
    blocks = [Para(lines=["fine"]), Plugin(handler=BrokenHandler)]

    with pytest.raises(PluginError) as excinfo:
        render(blocks, ctx)

    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_unknown_block_is_fatal(ctx: Context) -> None:
    with pytest.raises(UnknownBlockError):
        render([Para(lines=["x"]), object()], ctx)  # type: ignore[list-item]


def test_bad_attributes_abort_render(ctx: Context) -> None:
    with pytest.raises(RenderError):
        render([Para(lines=["x"], attrs="!!")], ctx)
    with pytest.raises(AttributeListError):
        render([Heading(level=1, content="x", attrs="=")], ctx)


def test_messages_are_gathered_in_document_order(ctx: Context) -> None:
    blocks = [
        Table(rows=[["a", "b"]], alignments=[None], lnb=3),
        BlockQuote(blocks=[Plugin(handler=EchoHandler())]),
        Table(rows=[["c"], ["d", "e", "f"]], alignments=["left"], lnb=9),
    ]

    _, messages = render(blocks, ctx)

    assert [(m.line, m.text) for m in messages] == [
        (3, "table body row 1 has 2 cells, expected 1"),
        (0, "echo"),
        (9, "table body row 2 has 3 cells, expected 1"),
    ]


def test_empty_block_sequence(ctx: Context) -> None:
    assert render([], ctx) == ("", [])
