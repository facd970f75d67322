"""
HTML rendering of classified source.

Styled kinds are wrapped in inline-styled spans, everything else is emitted
as escaped text, and the result sits in a single <pre> whose background
comes from the theme or palette. No <style> blocks are produced, so the
fragment can be pasted into editors that strip stylesheets.
"""

import html
from typing import Iterable, Optional

from discussion_formatter.core.classifier import classify
from discussion_formatter.core.tokens import Token
from discussion_formatter.logging import get_logger
from discussion_formatter.theme import DEFAULT_PALETTE_ID, PALETTES, PaletteRegistry, Theme, ThemeLoader
from discussion_formatter.theme.resolver import StyleResolver

logger = get_logger(__name__)

PRE_STYLE = (
    "padding:0.8rem;border:1px solid #ccc;overflow:auto;"
    "font-family:'Courier New',monospace;font-size:0.85rem;line-height:1.35;"
)


def escape_html(text: str) -> str:
    """Escape &, <, >, " and ' for element content and attribute values."""
    return html.escape(text, quote=True)


def render(
    tokens: Iterable[Token],
    theme: Optional[Theme] = None,
    palette_name: Optional[str] = DEFAULT_PALETTE_ID,
    registry: PaletteRegistry = PALETTES,
) -> str:
    """Render tokens as a <pre> fragment.

    Args:
        tokens: Output of classify()
        theme: External theme, or None for palette-only styling
        palette_name: Built-in palette; unknown names use the default palette
        registry: Palette lookup table

    Returns:
        HTML string; an empty token list gives an empty <pre> container
    """
    resolver = StyleResolver(registry.palette_for(palette_name), theme)

    # Each kind resolves the same way for the whole render
    styles = {}
    parts = []
    for token in tokens:
        text = escape_html(token.text)
        if not token.is_styled:
            parts.append(text)
            continue
        style = styles.get(token.kind)
        if style is None:
            style = styles[token.kind] = escape_html(resolver.style_for(token.kind))
        parts.append(f'<span style="{style}">{text}</span>')

    background = escape_html(resolver.background())
    return f'<pre style="background:{background};{PRE_STYLE}">{"".join(parts)}</pre>'


def highlight(
    source: Optional[str],
    theme_name: Optional[str] = DEFAULT_PALETTE_ID,
    loader: Optional[ThemeLoader] = None,
    registry: PaletteRegistry = PALETTES,
) -> str:
    """Highlight source code as an HTML fragment.

    The external theme with the given name is tried first; the built-in
    palette of the same name (or the default palette) fills any gaps.
    Returns an empty string for blank input.
    """
    if source is None or not source.strip():
        return ""

    if loader is None:
        loader = ThemeLoader.default()
    theme = loader.load(theme_name)
    if theme is None and theme_name and theme_name not in registry:
        logger.info(f"Unknown theme {theme_name!r}, using palette {registry.default.id!r}")

    return render(classify(source), theme, theme_name, registry)
