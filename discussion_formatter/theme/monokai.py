"""Monokai-inspired dark palette.

Leaves annotation and char unset so they follow the keyword and string colors.
"""

from .base import Palette


MONOKAI_PALETTE = Palette(
    name='Monokai Dark',
    id='monokai',
    background='#272822',
    base='#f8f8f2',
    keyword='#f92672',
    type='#66d9ef',
    string='#e6db74',
    comment='#75715e',
    number='#ae81ff',
)
