"""Palettes, external themes and style resolution."""

from .base import Palette, PaletteRegistry, Theme
from .dark import DARK_PALETTE
from .default import DEFAULT_PALETTE
from .loader import BUNDLED_THEMES_DIR, ThemeLoader
from .monokai import MONOKAI_PALETTE
from .resolver import StyleResolver, background_for, has_color, parse_declarations, style_for
from .tango import TANGO_PALETTE

DEFAULT_PALETTE_ID = DEFAULT_PALETTE.id

PALETTES = PaletteRegistry(
    [DEFAULT_PALETTE, DARK_PALETTE, TANGO_PALETTE, MONOKAI_PALETTE],
    default_id=DEFAULT_PALETTE_ID,
)

__all__ = [
    "Palette",
    "PaletteRegistry",
    "Theme",
    "ThemeLoader",
    "StyleResolver",
    "PALETTES",
    "DEFAULT_PALETTE_ID",
    "BUNDLED_THEMES_DIR",
    "DEFAULT_PALETTE",
    "DARK_PALETTE",
    "TANGO_PALETTE",
    "MONOKAI_PALETTE",
    "background_for",
    "has_color",
    "parse_declarations",
    "style_for",
]
