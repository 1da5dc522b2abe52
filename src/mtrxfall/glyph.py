import random
from dataclasses import dataclass
from typing import Optional

from .color import BLACK, Color, HslColor, to_hsl, to_rgb

# Half-width katakana, digits and a few symbols
ALPHABET = (
    "ﾊﾐﾋｰｳｼﾅﾓﾆｻﾜﾂｵﾘｱﾎﾃﾏｹﾒｴｶｷﾑﾕﾗｾﾈｽﾀﾇﾍｦｲｸｺｿﾁﾄﾉﾌﾔﾖﾙﾚﾛﾝ"
    "012345789Z"
    ":.\"=*+-<>¦╌ç"
)

# Saturation and lightness multiplier applied on every fade
FADE_FACTOR = 0.8


@dataclass
class Glyph:
    """
    One terminal cell. A glyph with no color is an empty cell; it renders
    as a black space and stays empty when faded.
    """
    character: str
    color: Optional[Color]

    @classmethod
    def empty(cls) -> 'Glyph':
        return cls(' ', None)

    @classmethod
    def new_random(cls, rng: random.Random, color: Color) -> 'Glyph':
        return cls(rng.choice(ALPHABET), color)

    @property
    def is_empty(self) -> bool:
        return self.color is None

    def fade(self):
        if self.color is None:
            return
        hsl = to_hsl(self.color)
        self.color = to_rgb(HslColor(hsl.h, hsl.s * FADE_FACTOR, hsl.l * FADE_FACTOR))

    def render(self, out):
        out.set_background(BLACK)
        out.set_foreground(self.color if self.color is not None else BLACK)
        out.put(self.character)
