"""
Shared fixtures for the mtrxfall test suite.

- ScriptedRandom: a seeded generator whose random() draws are scripted, so
  tests can force the column gate open or shut while choice() stays real.
- RecordingOutput: an output target that records every call render() makes.
"""
import os
import random
import sys

import pytest

_src = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if _src not in sys.path:
    sys.path.insert(0, _src)


class ScriptedRandom(random.Random):
    """random() returns ``value`` every time; choice() still draws from the seed."""

    def __init__(self, value, seed=0):
        super().__init__(seed)
        self.value = value
        self.draws = 0

    def random(self):
        self.draws += 1
        return self.value

    def getrandbits(self, k):
        # keeps choice() on the seeded bit stream instead of random()
        return super().getrandbits(k)


class RecordingOutput:
    def __init__(self, width, height=0):
        self.width = width
        self.height = height
        self.calls = []

    def hide_cursor(self):
        self.calls.append(('hide_cursor',))

    def show_cursor(self):
        self.calls.append(('show_cursor',))

    def move_home(self):
        self.calls.append(('move_home',))

    def set_foreground(self, color):
        self.calls.append(('fg', color))

    def set_background(self, color):
        self.calls.append(('bg', color))

    def put(self, character):
        self.calls.append(('put', character))

    def flush(self):
        self.calls.append(('flush',))

    @property
    def characters(self):
        return ''.join(c[1] for c in self.calls if c[0] == 'put')


@pytest.fixture
def open_gate():
    return ScriptedRandom(0.05)


@pytest.fixture
def shut_gate():
    return ScriptedRandom(0.5)


@pytest.fixture
def recorder():
    return RecordingOutput


@pytest.fixture
def scripted_random():
    return ScriptedRandom
