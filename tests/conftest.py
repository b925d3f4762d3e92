"""Shared fixtures: a recording terminal surface and a small game."""

import random
from collections import deque

import pytest

from grid_shooter.main import Game


class FakeSurface:
    """Records everything the renderer sends to the terminal."""

    def __init__(self, keys=()):
        self.keys = deque(keys)
        self.writes = []
        self.cursor = None
        self.foreground = None
        self.flushes = 0
        self.screen_clears = 0
        self.cursor_hidden = False
        self.restored = False

    def set_cursor(self, row, col):
        self.cursor = (row, col)

    def set_foreground(self, color):
        self.foreground = color

    def write_char(self, char, color):
        self.writes.append((self.cursor[0], self.cursor[1], char, color))
        self.foreground = color

    def clear_screen(self):
        self.screen_clears += 1

    def hide_cursor(self):
        self.cursor_hidden = True

    def flush(self):
        self.flushes += 1

    def restore(self):
        self.restored = True
        self.foreground = None

    def get_key_if_available(self):
        return self.keys.popleft() if self.keys else None


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game(surface, rng):
    """Default 24x48 game with its first frame already rendered."""
    return Game(surface=surface, rng=rng)
