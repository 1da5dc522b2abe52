from .color import BLACK, Color, HslColor, to_hsl, to_rgb
from .column import Column
from .glyph import ALPHABET, Glyph
from .terminal import AnsiTerminal, TerminalError
from .waterfall import Waterfall

__version__ = '0.1.0'
