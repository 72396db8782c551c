from bs4.element import NavigableString
import pytest

from latex2web.adapters.renderer import HtmlRenderer
from latex2web.core.config import ConversionConfig
from latex2web.core.context import RenderContext
from latex2web.core.exceptions import NestingTooDeepError


@pytest.fixture
def renderer() -> HtmlRenderer:
    return HtmlRenderer()


def _body(renderer: HtmlRenderer, inner: str) -> str:
    return renderer.render(f"<document>{inner}</document>").body_html


def test_text_node_is_trimmed_and_followed_by_a_space(renderer: HtmlRenderer) -> None:
    context = RenderContext(engine=renderer.engine)
    assert renderer.engine.render_node(NavigableString("  hi \n"), context) == "hi "
    assert renderer.engine.render_node(NavigableString(" \n\t "), context) == ""


def test_paragraph_with_bold_run(renderer: HtmlRenderer) -> None:
    rendered = renderer.render(
        "<document><title>Hi</title>"
        '<para><text>Hello </text><text font="bold">world</text></para>'
        "</document>"
    )
    assert rendered.body_html == "<p>Hello <strong>world</strong></p>"
    assert rendered.metadata.title == "Hi"
    assert rendered.metadata.author is None


def test_inline_wrappers_keep_words_apart(renderer: HtmlRenderer) -> None:
    body = _body(
        renderer,
        '<para>Use <text font="typewriter">ls</text> and <emph>then</emph> stop</para>',
    )
    assert body == "<p>Use <code>ls</code> and <em>then</em> stop</p>"


@pytest.mark.parametrize("tag", ["para", "p"])
def test_paragraph_aliases(renderer: HtmlRenderer, tag: str) -> None:
    assert _body(renderer, f"<{tag}>x</{tag}>") == "<p>x</p>"


@pytest.mark.parametrize("tag", ["emph", "em"])
def test_emphasis_aliases(renderer: HtmlRenderer, tag: str) -> None:
    assert _body(renderer, f"<para><{tag}>x</{tag}></para>") == "<p><em>x</em></p>"


def test_text_without_known_font_is_transparent(renderer: HtmlRenderer) -> None:
    assert _body(renderer, '<para><text font="italic">x</text></para>') == "<p>x</p>"


def test_whitespace_only_text_is_dropped(renderer: HtmlRenderer) -> None:
    assert _body(renderer, "\n  <para>\n   x\n  </para>\n") == "<p>x</p>"


def test_section_wraps_children(renderer: HtmlRenderer) -> None:
    body = _body(renderer, "<section><title>A</title><para>b</para></section>")
    assert body == "<section><h2>A</h2><p>b</p></section>"


@pytest.mark.parametrize("tag", ["tags", "tag", "ref", "bibref"])
def test_dropped_tags_hide_their_subtree(renderer: HtmlRenderer, tag: str) -> None:
    body = _body(renderer, f"<para>A<{tag}><para>hidden</para><emph>gone</emph></{tag}></para>")
    assert body == "<p>A</p>"


def test_creator_is_not_rendered_in_body(renderer: HtmlRenderer) -> None:
    body = _body(renderer, "<creator><personname>Ada</personname></creator><para>x</para>")
    assert body == "<p>x</p>"


def test_unknown_tags_are_transparent(renderer: HtmlRenderer) -> None:
    wrapped = _body(renderer, "<foo><para>x</para></foo>")
    bare = _body(renderer, "<para>x</para>")
    assert wrapped == bare == "<p>x</p>"


def test_itemize_keeps_only_item_children(renderer: HtmlRenderer) -> None:
    body = _body(
        renderer,
        "<itemize><item><para>one</para></item><para>stray</para><item>two</item></itemize>",
    )
    assert body == "<ul><li><p>one</p></li><li>two</li></ul>"


def test_enumerate_renders_ordered_list(renderer: HtmlRenderer) -> None:
    body = _body(renderer, "<enumerate><item>a</item><tag>1</tag><item>b</item></enumerate>")
    assert body == "<ol><li>a</li><li>b</li></ol>"


def test_items_outside_lists_are_transparent(renderer: HtmlRenderer) -> None:
    assert _body(renderer, "<item><para>x</para></item>") == "<p>x</p>"


@pytest.mark.parametrize("tag", ["tabular", "table"])
def test_table_keeps_rows_and_cells_only(renderer: HtmlRenderer, tag: str) -> None:
    body = _body(
        renderer,
        f"<{tag}>"
        "<tr><th>h</th><td>a</td><foo>x</foo></tr>"
        "<para>stray</para>"
        "<tr><td><emph>c</emph></td></tr>"
        f"</{tag}>",
    )
    assert body == (
        '<div class="table-wrapper"><table>'
        "<tr><th>h</th><td>a</td></tr>"
        "<tr><td><em>c</em></td></tr>"
        "</table></div>"
    )


def test_figure_with_caption(renderer: HtmlRenderer) -> None:
    body = _body(renderer, '<graphics graphic="x.png"><caption>Fig 1</caption></graphics>')
    assert body == '<figure><img src="x.png" alt="Fig 1"><figcaption>Fig 1</figcaption></figure>'


def test_figure_caption_is_found_among_descendants(renderer: HtmlRenderer) -> None:
    body = _body(
        renderer,
        '<figure graphic="y.svg"><toccaption/><wrap><caption>Deep <emph>cap</emph></caption></wrap></figure>',
    )
    assert body == (
        '<figure><img src="y.svg" alt="Deep cap"><figcaption>Deep cap</figcaption></figure>'
    )


def test_figure_without_caption_omits_figcaption(renderer: HtmlRenderer) -> None:
    body = _body(renderer, '<graphics graphic="x.png"/>')
    assert body == '<figure><img src="x.png" alt=""></figure>'


def test_figure_without_source_is_transparent(renderer: HtmlRenderer) -> None:
    body = _body(renderer, "<figure><graphics graphic=\"a.png\"/><caption>C</caption></figure>")
    assert body == '<figure><img src="a.png" alt=""></figure>C'


def test_verbatim_is_escaped_with_language_class(renderer: HtmlRenderer) -> None:
    body = _body(renderer, '<verbatim language="py">a&lt;b</verbatim>')
    assert body == '<pre><code class="language-py">a&lt;b</code></pre>'


def test_lstlisting_flattens_structure_and_keeps_whitespace(renderer: HtmlRenderer) -> None:
    # Without a language the class attribute is omitted rather than left as an
    # empty "language-" prefix.
    body = _body(
        renderer,
        "<lstlisting><line>if a &amp;&amp; b:</line>\n<line>    print(\"x\")</line></lstlisting>",
    )
    assert body == (
        "<pre><code>if a &amp;&amp; b:\n    print(&quot;x&quot;)</code></pre>"
    )


def test_inline_math_is_not_escaped(renderer: HtmlRenderer) -> None:
    # Math payloads go to MathJax untouched, unlike verbatim content.
    body = _body(
        renderer,
        '<para>Let <Math mode="inline"><XMath><XMTok>x&lt;1</XMTok></XMath></Math></para>',
    )
    assert body == "<p>Let \\(x<1\\)</p>"
    assert "&lt;" not in body


def test_display_math_uses_display_container(renderer: HtmlRenderer) -> None:
    body = _body(renderer, '<equation><math mode="display">a+b</math></equation>')
    assert body == '<div class="math-display">\\[a+b\\]</div>'


def test_general_text_is_not_escaped(renderer: HtmlRenderer) -> None:
    # Known gap: paragraph text reaches the page as-is.
    assert _body(renderer, "<para>a &lt; b &amp; c</para>") == "<p>a < b & c</p>"


def test_whole_tree_is_rendered_without_document_element(renderer: HtmlRenderer) -> None:
    rendered = renderer.render("<wrapper><title>T</title><para>x</para></wrapper>")
    assert rendered.body_html == "<h1>T</h1><p>x</p>"
    assert rendered.metadata.title == "T"


def test_rendering_does_not_mutate_tree(renderer: HtmlRenderer) -> None:
    from latex2web.core.document import parse_document

    tree = parse_document(
        '<document><title>T</title><section><para><ref>r</ref><text font="bold">x</text></para></section></document>'
    )
    before = str(tree)
    first = renderer.render_tree(tree)
    second = renderer.render_tree(tree)
    assert str(tree) == before
    assert first == second


def test_nesting_ceiling_raises_typed_error() -> None:
    renderer = HtmlRenderer(ConversionConfig(max_nesting=3))
    with pytest.raises(NestingTooDeepError) as excinfo:
        renderer.render("<document><a><b><c><d>x</d></c></b></a></document>")
    assert excinfo.value.limit == 3


def test_nesting_below_ceiling_renders() -> None:
    renderer = HtmlRenderer(ConversionConfig(max_nesting=10))
    body = renderer.render("<document><a><b><c><para>x</para></c></b></a></document>").body_html
    assert body == "<p>x</p>"


def test_punctuation_after_inline_element_is_spaced(renderer: HtmlRenderer) -> None:
    body = _body(renderer, '<para>Hello <text font="bold">world</text>.</para>')
    assert body == "<p>Hello <strong>world</strong> .</p>"
