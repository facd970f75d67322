"""Tests for the Qt preview highlighter."""

import pytest
from PyQt6.QtGui import QTextDocument, QTextFormat

from discussion_formatter.core.tokens import TokenKind
from discussion_formatter.gui.code_highlighter import SourceHighlighter, format_from_style
from discussion_formatter.theme import DARK_PALETTE, DEFAULT_PALETTE, Theme


@pytest.fixture
def document(qapp):
    doc = QTextDocument()
    yield doc


def _ranges(doc, block_number):
    """Return [(start, length, color_name)] for a block's highlight ranges."""
    block = doc.findBlockByNumber(block_number)
    return [
        (r.start, r.length, r.format.foreground().color().name())
        for r in block.layout().formats()
    ]


def _highlight(doc, text, **kwargs):
    highlighter = SourceHighlighter(doc, **kwargs)
    doc.setPlainText(text)
    highlighter.rehighlight()
    return highlighter


class TestFormatFromStyle:
    def test_color_bold_italic(self, qapp):
        fmt = format_from_style("color:#123456;font-weight:bold;font-style:italic;")
        assert fmt.foreground().color().name() == "#123456"
        assert fmt.font().bold()
        assert fmt.fontItalic()

    def test_numeric_weight(self, qapp):
        assert format_from_style("color:#000000;font-weight:700;").font().bold()
        assert not format_from_style("color:#000000;font-weight:400;").font().bold()

    def test_invalid_color_leaves_foreground_unset(self, qapp):
        fmt = format_from_style("color:not-a-color;")
        assert not fmt.hasProperty(QTextFormat.Property.ForegroundBrush)


class TestSourceHighlighter:
    def test_keyword_and_number_colors(self, document):
        _highlight(document, "return 42;", palette=DEFAULT_PALETTE)
        ranges = _ranges(document, 0)
        assert (0, 6, "#0000aa") in ranges
        assert (7, 2, "#aa00aa") in ranges

    def test_identifiers_are_not_formatted(self, document):
        _highlight(document, "foo bar", palette=DEFAULT_PALETTE)
        assert _ranges(document, 0) == []

    def test_keyword_is_bold_and_comment_italic(self, document):
        highlighter = _highlight(document, "x", palette=DARK_PALETTE)
        assert highlighter.format_for(TokenKind.KEYWORD).font().bold()
        assert highlighter.format_for(TokenKind.COMMENT).fontItalic()
        assert highlighter.format_for(TokenKind.IDENTIFIER) is None

    def test_block_comment_across_lines(self, document):
        _highlight(document, "int a; /* start\nmiddle\nend */ int b;", palette=DEFAULT_PALETTE)
        comment = "#777777"
        assert (7, 8, comment) in _ranges(document, 0)
        assert _ranges(document, 1) == [(0, 6, comment)]
        line2 = _ranges(document, 2)
        assert (0, 6, comment) in line2
        assert (7, 3, "#0044aa") in line2
        assert document.findBlockByNumber(0).userState() == 1
        assert document.findBlockByNumber(2).userState() == 0

    def test_closed_block_comment_does_not_carry_over(self, document):
        _highlight(document, "/**/\nint x;", palette=DEFAULT_PALETTE)
        assert document.findBlockByNumber(0).userState() == 0
        assert (0, 3, "#0044aa") in _ranges(document, 1)

    def test_theme_overrides_palette(self, document):
        theme = Theme.from_dict({"styles": {"keyword": "color:#111111;"}})
        _highlight(document, "if", theme=theme, palette=DEFAULT_PALETTE)
        assert _ranges(document, 0) == [(0, 2, "#111111")]

    def test_set_theme_rehighlights(self, document):
        highlighter = _highlight(document, "if", palette=DEFAULT_PALETTE)
        highlighter.set_theme(Theme(foreground="#e5e5e5"), DEFAULT_PALETTE)
        assert _ranges(document, 0) == [(0, 2, "#e5e5e5")]

    def test_background_color(self, document):
        highlighter = _highlight(document, "", palette=DARK_PALETTE)
        assert highlighter.background_color().name() == "#1e1e1e"
        highlighter.set_theme(Theme(background="#102030"))
        assert highlighter.background_color().name() == "#102030"

    def test_defaults_to_default_palette(self, document):
        highlighter = _highlight(document, "")
        assert highlighter.background_color().name() == "#ffffff"
