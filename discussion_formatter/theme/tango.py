"""Tango light palette."""

from .base import Palette


TANGO_PALETTE = Palette(
    name='Tango',
    id='tango',
    background='#f8f8f8',
    base='#222',
    keyword='#204a87',
    type='#204a87',
    string='#c41a16',
    comment='#8f5902',
    number='#5c3566',
    annotation='#75507b',
    char='#c41a16',
)
