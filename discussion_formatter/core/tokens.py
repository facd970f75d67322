"""Token model shared by the classifier, the resolver and the renderers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenKind(Enum):
    """Lexical category of a span of source text.

    Values are the names used as keys in external theme files.
    """
    COMMENT = 'comment'
    STRING = 'string'
    CHAR = 'char'
    NUMBER = 'number'
    KEYWORD = 'keyword'
    TYPE = 'type'
    ANNOTATION = 'annotation'
    IDENTIFIER = 'identifier'
    PUNCTUATION = 'punctuation'
    WHITESPACE = 'whitespace'

    @classmethod
    def from_key(cls, key: str) -> Optional['TokenKind']:
        """Parse a theme style key, returning None for unknown keys."""
        if key in _KEY_ALIASES:
            return _KEY_ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            return None


# Older theme files spell identifiers "ident"
_KEY_ALIASES = {'ident': TokenKind.IDENTIFIER}

# Kinds that get a styled span; the rest are emitted as plain text
STYLED_KINDS = frozenset({
    TokenKind.COMMENT,
    TokenKind.STRING,
    TokenKind.CHAR,
    TokenKind.NUMBER,
    TokenKind.KEYWORD,
    TokenKind.TYPE,
    TokenKind.ANNOTATION,
})


@dataclass(frozen=True)
class Token:
    """A classified span of source text."""
    kind: TokenKind
    text: str

    @property
    def is_styled(self) -> bool:
        return self.kind in STYLED_KINDS
