"""
Single-pass classifier for Java-like source text.

Scans left to right without backtracking and splits the input into
classified tokens. Rules are tried in a fixed order at each position:

- Whitespace runs
- Line comments (// ...) and block comments (/* ... */)
- String ("...") and character ('...') literals with backslash escapes
- Annotations (@Name)
- Numbers (lenient: digits, '.', '_', radix letters and hex digits)
- Identifiers, split into keywords, type names and plain identifiers
- Anything else as one-character punctuation

Unterminated comments and literals run to the end of input, so every input
is covered and the concatenated token text always equals the source.
"""

from typing import Callable, List, Optional, Tuple

from .tokens import Token, TokenKind

KEYWORDS = frozenset({
    'abstract', 'assert', 'break', 'case', 'catch', 'class', 'const',
    'continue', 'default', 'do', 'else', 'enum', 'extends', 'final',
    'finally', 'for', 'goto', 'if', 'implements', 'import', 'instanceof',
    'interface', 'native', 'new', 'package', 'private', 'protected',
    'public', 'return', 'strictfp', 'static', 'super', 'switch',
    'synchronized', 'this', 'throw', 'throws', 'transient', 'try',
    'volatile', 'while', 'record', 'sealed', 'permits', 'var',
})

TYPES = frozenset({
    'void', 'int', 'long', 'double', 'float', 'short', 'byte', 'char',
    'boolean', 'String', 'Object', 'List', 'Map', 'Set',
})

_NUMBER_CHARS = frozenset('0123456789._xXbBabcdefABCDEF')


def _is_ident_start(ch: str) -> bool:
    return ch.isalpha() or ch == '_' or ch == '$'


def _is_ident_part(ch: str) -> bool:
    return ch.isalnum() or ch == '_' or ch == '$'


def _scan_while(source: str, pos: int, predicate: Callable[[str], bool]) -> int:
    """Return the first index at or after pos where predicate fails."""
    end = len(source)
    while pos < end and predicate(source[pos]):
        pos += 1
    return pos


def _scan_quoted(source: str, pos: int, quote: str) -> int:
    """Scan a quoted literal starting at the opening quote."""
    end = len(source)
    pos += 1
    while pos < end:
        ch = source[pos]
        if ch == '\\':
            pos += 2
            continue
        pos += 1
        if ch == quote:
            return pos
    return end


def _whitespace(source: str, pos: int) -> Optional[Tuple[TokenKind, int]]:
    if not source[pos].isspace():
        return None
    return TokenKind.WHITESPACE, _scan_while(source, pos, str.isspace)


def _line_comment(source: str, pos: int) -> Optional[Tuple[TokenKind, int]]:
    if not source.startswith('//', pos):
        return None
    newline = source.find('\n', pos)
    return TokenKind.COMMENT, len(source) if newline < 0 else newline


def _block_comment(source: str, pos: int) -> Optional[Tuple[TokenKind, int]]:
    if not source.startswith('/*', pos):
        return None
    close = source.find('*/', pos + 2)
    return TokenKind.COMMENT, len(source) if close < 0 else close + 2


def _string(source: str, pos: int) -> Optional[Tuple[TokenKind, int]]:
    if source[pos] != '"':
        return None
    return TokenKind.STRING, _scan_quoted(source, pos, '"')


def _char(source: str, pos: int) -> Optional[Tuple[TokenKind, int]]:
    if source[pos] != "'":
        return None
    return TokenKind.CHAR, _scan_quoted(source, pos, "'")


def _annotation(source: str, pos: int) -> Optional[Tuple[TokenKind, int]]:
    if source[pos] != '@':
        return None
    end = _scan_while(source, pos + 1, _is_ident_part)
    if end == pos + 1:
        # Bare '@' falls through to punctuation
        return None
    return TokenKind.ANNOTATION, end


def _number(source: str, pos: int) -> Optional[Tuple[TokenKind, int]]:
    if not source[pos].isdigit():
        return None
    return TokenKind.NUMBER, _scan_while(source, pos + 1, _NUMBER_CHARS.__contains__)


def _word(source: str, pos: int) -> Optional[Tuple[TokenKind, int]]:
    if not _is_ident_start(source[pos]):
        return None
    end = _scan_while(source, pos + 1, _is_ident_part)
    word = source[pos:end]
    if word in KEYWORDS:
        return TokenKind.KEYWORD, end
    if word in TYPES:
        return TokenKind.TYPE, end
    return TokenKind.IDENTIFIER, end


# Order matters: the first matching rule wins at each position
_RULES = (
    _whitespace,
    _line_comment,
    _block_comment,
    _string,
    _char,
    _annotation,
    _number,
    _word,
)


def classify(source: Optional[str]) -> List[Token]:
    """Split source into classified tokens.

    Never raises; empty or None input yields an empty list.
    """
    tokens: List[Token] = []
    if not source:
        return tokens

    pos = 0
    end = len(source)
    while pos < end:
        for rule in _RULES:
            match = rule(source, pos)
            if match is not None:
                kind, stop = match
                break
        else:
            kind, stop = TokenKind.PUNCTUATION, pos + 1
        tokens.append(Token(kind, source[pos:stop]))
        pos = stop
    return tokens
