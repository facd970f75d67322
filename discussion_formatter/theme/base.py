"""Palette, theme and registry types."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional

from discussion_formatter.core.tokens import TokenKind


@dataclass(frozen=True)
class Palette:
    """Built-in set of colors, one per render-relevant token kind."""

    name: str
    id: str
    background: str
    base: str
    keyword: str
    type: str
    string: str
    comment: str
    number: str
    annotation: Optional[str] = None
    char: Optional[str] = None

    def declaration_for(self, kind: TokenKind) -> str:
        """Return the palette's style declaration for a token kind.

        Annotations borrow the keyword color and chars the string color when
        the palette leaves them unset. Unstyled kinds use the base color.
        """
        if kind is TokenKind.KEYWORD:
            return f"color:{self.keyword};font-weight:bold;"
        if kind is TokenKind.TYPE:
            return f"color:{self.type};font-weight:bold;"
        if kind is TokenKind.STRING:
            return f"color:{self.string};"
        if kind is TokenKind.CHAR:
            return f"color:{self.char or self.string};"
        if kind is TokenKind.COMMENT:
            return f"color:{self.comment};font-style:italic;"
        if kind is TokenKind.NUMBER:
            return f"color:{self.number};"
        if kind is TokenKind.ANNOTATION:
            return f"color:{self.annotation or self.keyword};"
        return f"color:{self.base};"


def _clean(value: Any) -> Optional[str]:
    """Keep non-blank strings, drop everything else."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


@dataclass(frozen=True)
class Theme:
    """External, possibly partial override of per-kind styling.

    Built from the JSON object of a theme file:

        {"name": ..., "description": ..., "background": ..., "foreground": ...,
         "styles": {"keyword": "color:#569cd6;font-weight:bold;", ...}}
    """

    name: str = ""
    description: str = ""
    background: Optional[str] = None
    foreground: Optional[str] = None
    styles: Mapping[TokenKind, str] = field(default_factory=dict, hash=False)
    default_style: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'styles', MappingProxyType(dict(self.styles)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Theme':
        """Parse a JSON-like mapping, ignoring unknown or malformed entries."""
        raw_styles = data.get('styles')
        if not isinstance(raw_styles, Mapping):
            raw_styles = {}

        styles = {}
        default_style = None
        for key, value in raw_styles.items():
            value = _clean(value)
            if value is None:
                continue
            if key == 'default':
                default_style = value
                continue
            kind = TokenKind.from_key(key)
            if kind is not None:
                styles[kind] = value

        return cls(
            name=_clean(data.get('name')) or "",
            description=_clean(data.get('description')) or "",
            background=_clean(data.get('background')),
            foreground=_clean(data.get('foreground')),
            styles=styles,
            default_style=default_style,
        )


class PaletteRegistry:
    """Immutable lookup table of built-in palettes.

    Lookups are total: unknown or blank names give the default palette.
    """

    def __init__(self, palettes: Iterable[Palette], default_id: str):
        table = {palette.id: palette for palette in palettes}
        if default_id not in table:
            raise ValueError(f"Default palette {default_id!r} is not registered")
        self._palettes = MappingProxyType(table)
        self._default_id = default_id

    @property
    def default(self) -> Palette:
        return self._palettes[self._default_id]

    def palette_for(self, name: Optional[str]) -> Palette:
        if not name:
            return self.default
        return self._palettes.get(name.strip(), self.default)

    def names(self) -> List[str]:
        return list(self._palettes)

    def __contains__(self, name: object) -> bool:
        return name in self._palettes

    def __len__(self) -> int:
        return len(self._palettes)
