"""
mtrxfall - falling character rain for truecolor terminals
"""
import random
import sys
import time

from .color import Color
from .debug import log
from .terminal import AnsiTerminal, TerminalError
from .waterfall import Waterfall

BASE_COLOR = Color(0, 255, 43)
FRAME_INTERVAL = 0.1  # seconds per tick


def run(terminal, waterfall, rng, frames=None, interval=FRAME_INTERVAL):
    """Render, step, sleep. Runs forever unless ``frames`` is given."""
    tick = 0
    while frames is None or tick < frames:
        waterfall.render(terminal)
        waterfall.step(rng)
        time.sleep(interval)
        tick += 1


def _fatal(e: TerminalError) -> int:
    log(f'fatal: {e}')
    sys.stderr.write(f"mtrxfall: {e}\n")
    return 1


def main() -> int:
    log('mtrxfall starting')
    terminal = None
    try:
        terminal = AnsiTerminal(sys.stdout)
        log(f'terminal size {terminal.width}x{terminal.height}')

        seed = time.time_ns() // 1000
        log(f'seed {seed}')

        waterfall = Waterfall(terminal.width, terminal.height, BASE_COLOR)
        run(terminal, waterfall, random.Random(seed))
    except TerminalError as e:
        return _fatal(e)
    except KeyboardInterrupt:
        if terminal is not None:
            try:
                terminal.restore()
            except TerminalError as e:
                return _fatal(e)
        return 0
    return 0

