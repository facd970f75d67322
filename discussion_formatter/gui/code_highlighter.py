"""
Live preview highlighter for Qt text widgets.

Drives a QSyntaxHighlighter with the same classifier and style resolver
as the HTML renderer, so the preview matches the exported markup:
- color declarations become the foreground
- font-weight bold (or >= 600) becomes bold
- font-style italic/oblique becomes italic
"""

from typing import Dict, Optional

from PyQt6.QtGui import QColor, QFont, QSyntaxHighlighter, QTextCharFormat, QTextDocument

from discussion_formatter.core.classifier import classify
from discussion_formatter.core.tokens import STYLED_KINDS, TokenKind
from discussion_formatter.logging import get_logger
from discussion_formatter.theme import PALETTES, Palette, Theme
from discussion_formatter.theme.resolver import StyleResolver, parse_declarations

logger = get_logger(__name__)

# Block states
_STATE_NORMAL = 0
_STATE_IN_BLOCK_COMMENT = 1


def format_from_style(style: str) -> QTextCharFormat:
    """Build a QTextCharFormat from an inline CSS declaration string."""
    declarations = parse_declarations(style)
    fmt = QTextCharFormat()

    color = QColor(declarations.get('color', ''))
    if color.isValid():
        fmt.setForeground(color)
    else:
        logger.debug(f"Ignoring unparseable color in style {style!r}")

    weight = declarations.get('font-weight', '').lower()
    if weight in ('bold', 'bolder') or (weight.isdigit() and int(weight) >= 600):
        fmt.setFontWeight(QFont.Weight.Bold)

    if declarations.get('font-style', '').lower() in ('italic', 'oblique'):
        fmt.setFontItalic(True)

    return fmt


class SourceHighlighter(QSyntaxHighlighter):
    """Syntax highlighter for Java-like source using palette/theme styling.

    Line-local tokens come straight from classify(); block comments that
    span lines are tracked with the block state.
    """

    def __init__(
        self,
        document: QTextDocument,
        theme: Optional[Theme] = None,
        palette: Optional[Palette] = None,
    ):
        super().__init__(document)
        self._resolver = StyleResolver(palette or PALETTES.default, theme)
        self._formats: Dict[TokenKind, QTextCharFormat] = self._create_formats()

    def _create_formats(self) -> Dict[TokenKind, QTextCharFormat]:
        """Create text formats for each styled token kind."""
        return {
            kind: format_from_style(self._resolver.style_for(kind))
            for kind in STYLED_KINDS
        }

    def set_theme(self, theme: Optional[Theme], palette: Optional[Palette] = None) -> None:
        """Swap styling and rehighlight the whole document."""
        self._resolver = StyleResolver(palette or PALETTES.default, theme)
        self._formats = self._create_formats()
        self.rehighlight()

    def background_color(self) -> QColor:
        return QColor(self._resolver.background())

    def format_for(self, kind: TokenKind) -> Optional[QTextCharFormat]:
        return self._formats.get(kind)

    def highlightBlock(self, text: str) -> None:
        """Apply syntax highlighting to a block of text.

        Args:
            text: The text content of the block
        """
        self.setCurrentBlockState(_STATE_NORMAL)
        comment_format = self._formats[TokenKind.COMMENT]
        start = 0

        # Continuing a block comment from a previous line
        if self.previousBlockState() == _STATE_IN_BLOCK_COMMENT:
            close = text.find('*/')
            if close < 0:
                self.setFormat(0, len(text), comment_format)
                self.setCurrentBlockState(_STATE_IN_BLOCK_COMMENT)
                return
            start = close + 2
            self.setFormat(0, start, comment_format)

        offset = start
        tokens = classify(text[start:])
        for token in tokens:
            fmt = self._formats.get(token.kind)
            if fmt is not None:
                self.setFormat(offset, len(token.text), fmt)
            offset += len(token.text)

        # An unterminated block comment runs to the end of the line and beyond
        if tokens:
            last = tokens[-1]
            if (last.kind is TokenKind.COMMENT and last.text.startswith('/*')
                    and (len(last.text) < 4 or not last.text.endswith('*/'))):
                self.setCurrentBlockState(_STATE_IN_BLOCK_COMMENT)
