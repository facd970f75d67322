"""Dark palette modelled on the VS Code dark+ colors."""

from .base import Palette


DARK_PALETTE = Palette(
    name='Dark',
    id='dark',
    background='#1e1e1e',
    base='#d4d4d4',
    keyword='#569cd6',
    type='#4fc1ff',
    string='#ce9178',
    comment='#6a9955',
    number='#b5cea8',
    annotation='#c586c0',
    char='#ce9178',
)
