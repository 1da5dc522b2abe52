import random
from typing import Iterator, List, Tuple

from .color import Color
from .column import Column
from .glyph import Glyph


class Waterfall:
    """
    The full animation state: ``width`` independent columns of ``height`` cells.

    render() emits cells row-major without repositioning the cursor between
    rows, so the output target must be exactly ``width`` cells wide and wrap
    lines itself. A target of any other width is rejected.
    """

    def __init__(self, width: int, height: int, base_color: Color):
        self.width = width
        self.height = height
        self.base_color = base_color
        self.columns: List[Column] = [Column(height, base_color) for _ in range(width)]

    def step(self, rng: random.Random):
        # left to right, so a seeded generator replays the same frames
        for column in self.columns:
            column.step(rng)

    def cells(self) -> Iterator[Tuple[int, int, Glyph]]:
        for y in range(self.height):
            for x, column in enumerate(self.columns):
                yield x, y, column.glyphs[y]

    def render(self, out):
        if out.width != self.width:
            raise ValueError(
                f"output is {out.width} cells wide, waterfall needs exactly {self.width}"
            )
        out.hide_cursor()
        out.move_home()
        for y in range(self.height):
            for column in self.columns:
                column.render(out, y)
        out.show_cursor()
        out.flush()
