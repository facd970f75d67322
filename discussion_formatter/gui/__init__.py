"""Qt preview widgets."""
from .code_highlighter import SourceHighlighter, format_from_style

__all__ = ['SourceHighlighter', 'format_from_style']
