"""Turn backtick and <code> snippets in assignment prose into styled HTML."""

import re
from typing import Optional

from discussion_formatter.theme import ThemeLoader

from .html import escape_html, highlight

# One pass, fenced blocks first, so text inside a finished snippet is never rescanned
SNIPPET_RE = re.compile(
    r"```(?P<fenced>[\s\S]*?)```"
    r"|`(?P<inline>[^`]+)`"
    r"|<code>(?P<tag>[^<]+)</code>"
)

INLINE_CODE_STYLE = (
    "background:#f1f1f1;padding:2px 4px;border-radius:3px;"
    "font-family:'Courier New',monospace;"
)
FENCED_PRE_STYLE = (
    "background:#f5f5f5;padding:1em;border:1px solid #ccc;overflow:auto;"
    "font-family:'Courier New',monospace;"
)


def _strip_trailing_newline(text: str) -> str:
    return text[:-1] if text.endswith("\n") else text


def _inline_code(code: str) -> str:
    return f'<code style="{INLINE_CODE_STYLE}">{escape_html(code.strip())}</code>'


def process(
    prose: Optional[str],
    theme_name: Optional[str] = None,
    loader: Optional[ThemeLoader] = None,
) -> str:
    """Convert code snippets embedded in prose.

    Fenced ```blocks``` win over inline `code` starting at the same place, and
    backticks inside a fenced block stay part of its source. With a
    theme_name, fenced blocks are syntax highlighted; otherwise they become
    plain escaped <pre> blocks.
    """
    if not prose:
        return ""

    def snippet(match: re.Match) -> str:
        if match.group("fenced") is None:
            return _inline_code(match.group("inline") or match.group("tag"))
        code = _strip_trailing_newline(match.group("fenced"))
        if theme_name is not None:
            highlighted = highlight(code, theme_name, loader=loader)
            if highlighted:
                return highlighted
        return f'<pre style="{FENCED_PRE_STYLE}">{escape_html(code)}</pre>'

    return SNIPPET_RE.sub(snippet, prose)
