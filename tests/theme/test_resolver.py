"""Tests for the style precedence chain and the color guarantee."""

import pytest

from discussion_formatter.core.tokens import TokenKind
from discussion_formatter.theme import (
    DARK_PALETTE,
    DEFAULT_PALETTE,
    PALETTES,
    Palette,
    StyleResolver,
    Theme,
    background_for,
    has_color,
    parse_declarations,
    style_for,
)
from discussion_formatter.theme.resolver import NEUTRAL_COLOR

K = TokenKind

THEMES = [
    None,
    Theme(),
    Theme(foreground="#e5e5e5"),
    Theme(background="#000000"),
    Theme(styles={K.KEYWORD: "font-weight:bold;"}),
    Theme(default_style="font-style:italic;"),
    Theme(styles={K.STRING: "background-color:#eee;"}, foreground="#010101"),
    Theme(styles={K.COMMENT: "color:#123456;"}, default_style="color:#654321;"),
]


class TestDeclarations:
    def test_parse(self):
        assert parse_declarations("color:#fff; Font-Weight : bold ;;junk") == {
            "color": "#fff",
            "font-weight": "bold",
        }

    def test_background_color_is_not_color(self):
        assert not has_color("background-color:#eee;")
        assert has_color("background-color:#eee;color:#111;")
        assert has_color("COLOR: red")

    def test_empty_color_value_is_not_color(self):
        assert not has_color("color:;")


class TestPrecedence:
    def test_kind_style_beats_default(self):
        theme = Theme(styles={K.KEYWORD: "color:#111;"}, default_style="color:#222;")
        assert style_for(K.KEYWORD, theme, DEFAULT_PALETTE) == "color:#111;"

    def test_default_used_when_kind_absent(self):
        theme = Theme(default_style="color:#222;")
        assert style_for(K.KEYWORD, theme, DEFAULT_PALETTE) == "color:#222;"

    def test_default_beats_foreground(self):
        theme = Theme(default_style="color:#222;", foreground="#333")
        assert style_for(K.NUMBER, theme, DEFAULT_PALETTE) == "color:#222;"

    def test_foreground_beats_palette(self):
        theme = Theme(foreground="#e5e5e5")
        assert style_for(K.KEYWORD, theme, DEFAULT_PALETTE) == "color:#e5e5e5;"

    def test_palette_used_without_theme(self):
        assert style_for(K.KEYWORD, None, DARK_PALETTE) == "color:#569cd6;font-weight:bold;"

    def test_empty_theme_falls_through_to_palette(self):
        assert style_for(K.COMMENT, Theme(), DARK_PALETTE) == DARK_PALETTE.declaration_for(K.COMMENT)

    def test_theme_from_dict_precedence(self, theme_factory):
        theme = theme_factory(styles={"keyword": "color:#111;", "default": "color:#222;"})
        assert style_for(K.KEYWORD, theme, DEFAULT_PALETTE) == "color:#111;"
        assert style_for(K.TYPE, theme, DEFAULT_PALETTE) == "color:#222;"

    def test_foreground_only_theme_colors_every_kind(self, theme_factory):
        theme = theme_factory(foreground="#e5e5e5")
        for kind in TokenKind:
            assert style_for(kind, theme, DEFAULT_PALETTE) == "color:#e5e5e5;"

    def test_strategies_run_in_declared_order(self):
        resolver = StyleResolver(DEFAULT_PALETTE, Theme())
        names = [s.__name__ for s in resolver._strategies]
        assert names == ["_from_kind_style", "_from_default_style", "_from_foreground", "_from_palette"]


class TestColorGuarantee:
    def test_prepends_theme_foreground(self):
        theme = Theme(styles={K.KEYWORD: "font-weight:bold;"}, foreground="#abcdef")
        assert style_for(K.KEYWORD, theme, DEFAULT_PALETTE) == "color:#abcdef;font-weight:bold;"

    def test_prepends_palette_base_without_foreground(self):
        theme = Theme(styles={K.KEYWORD: "font-weight:bold;"})
        assert style_for(K.KEYWORD, theme, DARK_PALETTE) == "color:#d4d4d4;font-weight:bold;"

    def test_background_color_alone_gets_a_color(self):
        theme = Theme(styles={K.STRING: "background-color:#eee;"})
        assert style_for(K.STRING, theme, DEFAULT_PALETTE) == "color:#222;background-color:#eee;"

    def test_missing_trailing_semicolon_is_added(self):
        theme = Theme(default_style="font-style:italic")
        assert style_for(K.COMMENT, theme, DEFAULT_PALETTE) == "color:#222;font-style:italic;"

    def test_neutral_color_when_palette_has_no_base(self):
        palette = Palette(
            name="Bare", id="bare", background="", base="",
            keyword="#f00", type="#0f0", string="#00f", comment="#888", number="#ff0",
        )
        theme = Theme(styles={K.KEYWORD: "font-weight:bold;"})
        assert style_for(K.KEYWORD, theme, palette) == f"color:{NEUTRAL_COLOR};font-weight:bold;"

    @pytest.mark.parametrize("theme", THEMES)
    @pytest.mark.parametrize("palette_name", PALETTES.names() + ["unknown"])
    def test_every_combination_has_color(self, theme, palette_name):
        palette = PALETTES.palette_for(palette_name)
        for kind in TokenKind:
            assert has_color(style_for(kind, theme, palette))


class TestBackground:
    def test_theme_background_wins(self):
        assert background_for(Theme(background="#000000"), DEFAULT_PALETTE) == "#000000"

    def test_palette_background_without_theme(self):
        assert background_for(None, DARK_PALETTE) == "#1e1e1e"

    def test_theme_without_background_uses_palette(self, theme_factory):
        assert background_for(theme_factory(background="  "), DARK_PALETTE) == "#1e1e1e"

    def test_resolver_exposes_inputs(self):
        theme = Theme(name="t")
        resolver = StyleResolver(DARK_PALETTE, theme)
        assert resolver.palette is DARK_PALETTE
        assert resolver.theme is theme
        assert resolver.background() == "#1e1e1e"
