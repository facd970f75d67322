"""Syntax-highlighted HTML for coursework discussion posts."""

from .core.classifier import classify
from .core.tokens import Token, TokenKind
from .render.html import highlight, render
from .theme import PALETTES, Palette, PaletteRegistry, StyleResolver, Theme, ThemeLoader

__version__ = "0.3.0"

__all__ = [
    "classify",
    "highlight",
    "render",
    "Token",
    "TokenKind",
    "Palette",
    "PaletteRegistry",
    "Theme",
    "ThemeLoader",
    "StyleResolver",
    "PALETTES",
]
