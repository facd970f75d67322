"""
Resolve the inline style of each token kind.

Precedence, first non-empty result wins:

1. the theme's style for the kind
2. the theme's "default" style
3. the theme's foreground color
4. the palette's declaration for the kind

Whatever wins is then given a color declaration if it lacks one, taken from
the theme foreground, the palette base color, or NEUTRAL_COLOR.
"""

from typing import Callable, Dict, Optional, Tuple

from discussion_formatter.core.tokens import TokenKind
from discussion_formatter.logging import get_logger

from .base import Palette, Theme

logger = get_logger(__name__)

NEUTRAL_COLOR = '#222'
NEUTRAL_BACKGROUND = '#ffffff'


def parse_declarations(style: str) -> Dict[str, str]:
    """Split "prop:value;prop:value;" into a dict with lowercased property names."""
    declarations: Dict[str, str] = {}
    for part in style.split(';'):
        prop, sep, value = part.partition(':')
        prop = prop.strip().lower()
        if sep and prop:
            declarations[prop] = value.strip()
    return declarations


def has_color(style: str) -> bool:
    """True if the style sets the text color (background-color does not count)."""
    return bool(parse_declarations(style).get('color'))


class StyleResolver:
    """Resolves token styles for one palette and an optional theme.

    The palette is required; pass the result of PaletteRegistry.palette_for.
    """

    def __init__(self, palette: Palette, theme: Optional[Theme] = None):
        self._palette = palette
        self._theme = theme
        self._strategies: Tuple[Callable[[TokenKind], Optional[str]], ...] = (
            self._from_kind_style,
            self._from_default_style,
            self._from_foreground,
            self._from_palette,
        )

    @property
    def palette(self) -> Palette:
        return self._palette

    @property
    def theme(self) -> Optional[Theme]:
        return self._theme

    def style_for(self, kind: TokenKind) -> str:
        for strategy in self._strategies:
            style = strategy(kind)
            if style:
                return self._ensure_color(style)
        # Only reached without a palette
        return f"color:{NEUTRAL_COLOR};"

    def background(self) -> str:
        if self._theme is not None and self._theme.background:
            return self._theme.background
        if self._palette is not None and self._palette.background:
            return self._palette.background
        return NEUTRAL_BACKGROUND

    # Strategies, in precedence order

    def _from_kind_style(self, kind: TokenKind) -> Optional[str]:
        if self._theme is None:
            return None
        return self._theme.styles.get(kind)

    def _from_default_style(self, kind: TokenKind) -> Optional[str]:
        if self._theme is None:
            return None
        return self._theme.default_style

    def _from_foreground(self, kind: TokenKind) -> Optional[str]:
        if self._theme is None or not self._theme.foreground:
            return None
        return f"color:{self._theme.foreground};"

    def _from_palette(self, kind: TokenKind) -> Optional[str]:
        if self._palette is None:
            return None
        return self._palette.declaration_for(kind)

    def _ensure_color(self, style: str) -> str:
        if has_color(style):
            return style
        if self._theme is not None and self._theme.foreground:
            color = self._theme.foreground
        elif self._palette is not None and self._palette.base:
            color = self._palette.base
        else:
            color = NEUTRAL_COLOR
        logger.debug(f"Style {style!r} has no color, prepending {color}")
        if not style.rstrip().endswith(';'):
            style = style.rstrip() + ';'
        return f"color:{color};{style}"


def style_for(kind: TokenKind, theme: Optional[Theme], palette: Palette) -> str:
    """Functional form of StyleResolver.style_for."""
    return StyleResolver(palette, theme).style_for(kind)


def background_for(theme: Optional[Theme], palette: Palette) -> str:
    """Container background: theme background, then palette background."""
    return StyleResolver(palette, theme).background()
