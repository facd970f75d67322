"""Source classification and settings."""

from .classifier import KEYWORDS, TYPES, classify
from .tokens import STYLED_KINDS, Token, TokenKind

__all__ = [
    "KEYWORDS",
    "TYPES",
    "STYLED_KINDS",
    "Token",
    "TokenKind",
    "classify",
]
