"""Light default palette used whenever a name is not recognised."""

from .base import Palette


DEFAULT_PALETTE = Palette(
    name='Default Light',
    id='default',
    background='#ffffff',
    base='#222',
    keyword='#0000aa',
    type='#0044aa',
    string='#aa1111',
    comment='#777777',
    number='#aa00aa',
    annotation='#aa5500',
    char='#aa1111',
)
