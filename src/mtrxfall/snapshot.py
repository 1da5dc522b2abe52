"""
Render a waterfall frame to a PNG image.

Usage:
    mtrxfall-snapshot --width 80 --height 24 --steps 120 --seed 7 --out frame.png

Simulates ``--steps`` ticks with a seeded generator, then draws every filled
cell as its glyph on a black grid of ``--cell`` pixel squares.
"""
import argparse
import os
import random

from PIL import Image, ImageDraw, ImageFont

from .debug import log
from .main import BASE_COLOR
from .waterfall import Waterfall


def load_font(path=None, size=14):
    if path:
        return ImageFont.truetype(path, size)
    # the scalable default font takes any character; the bitmap one is latin-1 only
    return ImageFont.load_default(size=size)


def render_frame(waterfall: Waterfall, cell: int = 16, font=None) -> Image.Image:
    font = font if font is not None else load_font()
    img = Image.new('RGB', (waterfall.width * cell, waterfall.height * cell), (0, 0, 0))
    draw = ImageDraw.Draw(img)

    for x, y, glyph in waterfall.cells():
        if glyph.is_empty:
            continue
        cx = x * cell
        cy = y * cell
        # center glyph in cell
        bbox = font.getbbox(glyph.character)
        gw = bbox[2] - bbox[0]
        gh = bbox[3] - bbox[1]
        gx = cx + (cell - gw) // 2 - bbox[0]
        gy = cy + (cell - gh) // 2 - bbox[1]
        c = glyph.color
        draw.text((gx, gy), glyph.character, font=font, fill=(c.r, c.g, c.b))
    return img


def save_frame(waterfall: Waterfall, out_png: str, cell: int = 16, font=None):
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    render_frame(waterfall, cell, font).save(out_png)
    log(f'snapshot {waterfall.width}x{waterfall.height} written to {out_png}')


def main(argv=None):
    p = argparse.ArgumentParser(description='Render a waterfall frame to PNG')
    p.add_argument('--width', type=int, default=80)
    p.add_argument('--height', type=int, default=24)
    p.add_argument('--steps', type=int, default=120)
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--cell', type=int, default=16)
    p.add_argument('--font', default=None)
    p.add_argument('--size', type=int, default=14)
    p.add_argument('--out', default='frame.png')
    args = p.parse_args(argv)

    rng = random.Random(args.seed)
    waterfall = Waterfall(args.width, args.height, BASE_COLOR)
    for _ in range(args.steps):
        waterfall.step(rng)

    save_frame(waterfall, args.out, args.cell, load_font(args.font, args.size))


if __name__ == '__main__':
    main()
