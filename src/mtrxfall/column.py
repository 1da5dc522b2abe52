import random
from typing import List

from .color import Color
from .glyph import Glyph

# A parked column starts a new drop when its gate draw is at most this
GATE_THRESHOLD = 0.1


class Column:
    """
    One vertical stream. ``active_index`` is the row the next spawned glyph
    is written to; while it sits at 0 the column is parked at the top and
    each tick only starts a drop with probability GATE_THRESHOLD.
    """

    def __init__(self, height: int, base_color: Color):
        self.height = height
        self.base_color = base_color
        self.glyphs: List[Glyph] = [Glyph.empty() for _ in range(height)]
        self.active_index = 0

    def step(self, rng: random.Random):
        if self.active_index == 0 and rng.random() > GATE_THRESHOLD:
            return

        for glyph in self.glyphs:
            glyph.fade()

        self.glyphs[self.active_index] = Glyph.new_random(rng, self.base_color)
        self.active_index += 1
        if self.active_index >= self.height:
            self.active_index = 0

    def render(self, out, y: int):
        self.glyphs[y].render(out)
