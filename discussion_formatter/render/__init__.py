"""HTML output."""

from .html import escape_html, highlight, render
from .inline_code import process as process_inline_code

__all__ = [
    "escape_html",
    "highlight",
    "render",
    "process_inline_code",
]
