import pytest

from blockrender.entities import escape, unescape
from blockrender.errors import EntityDecodeError, RenderError


def test_escape_keeps_existing_entities() -> None:
    assert escape("a & b &amp; c", False) == "a &amp; b &amp; c"
    assert escape("&#39; &copy; &#x21A9;") == "&#39; &copy; &#x21A9;"


def test_escape_encode_converts_every_ampersand() -> None:
    assert escape("&amp;", True) == "&amp;amp;"
    assert escape("AT&T", True) == "AT&amp;T"


def test_escape_markup_and_quotes() -> None:
    assert escape("<a href=\"x\">it's</a>") == "&lt;a href=&quot;x&quot;&gt;it&#39;s&lt;/a&gt;"


@pytest.mark.parametrize("text", ["plain text", "ünïcödé: 42", "", "tabs\tand\nnewlines"])
def test_unescape_reverses_escape_for_plain_text(text: str) -> None:
    assert unescape(escape(text, True)) == text


def test_unescape_mixed_forms_in_one_pass() -> None:
    assert unescape("A&#58;B&#x3A;C&colon;D") == "A:B:C:D"


def test_unescape_leaves_named_entities() -> None:
    assert unescape("&amp; &lt;") == "&amp; &lt;"
    assert unescape("&#x21A9; and &x") == "↩ and &x"


@pytest.mark.parametrize(
    "text",
    ["&#12", "x &#x41", "&#;", "&#xZZ;", "&#1a;", "&#x110000;", "&#xD800;", "&#57343;"],
)
def test_unescape_malformed_numeric_entity_is_fatal(text: str) -> None:
    with pytest.raises(EntityDecodeError):
        unescape(text)


def test_decode_error_is_a_render_error() -> None:
    with pytest.raises(RenderError):
        unescape("&#99")
