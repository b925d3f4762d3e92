"""
Player Module
==============
Player entity creation and input handling.
"""

from enum import Enum, auto
from typing import Optional

from .components import EntityKind
from .config import PLAYER_HP
from .entity import Entity
from .grid import WHITE
from .point import Point


PLAYER_SHAPE = [
    ' ▐▌ ',
    ' ██ ',
    ' ▐▌ ',
    '▐██▌',
]


def create_player(game, hp: int = PLAYER_HP) -> Entity:
    """Create the player at the bottom centre of the playfield."""
    return Entity(
        game,
        game.entities.next_id(),
        EntityKind.PLAYER,
        PLAYER_SHAPE,
        location=Point(game.max_row, game.max_col // 2),
        hp=hp,
        color=WHITE,
    )


class Command(Enum):
    """Discrete actions the game understands."""
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    FIRE = auto()
    CLEAR = auto()
    STOP = auto()


MOVES = {
    Command.LEFT: Point(0, -1),
    Command.RIGHT: Point(0, 1),
    Command.UP: Point(-1, 0),
    Command.DOWN: Point(1, 0),
}


class InputHandler:
    """
    Translates blessed keystrokes into commands.

    Arrow keys move, SPACE fires, C clears the screen, ESC or Q quits.
    """

    KEY_NAMES = {
        'KEY_LEFT': Command.LEFT,
        'KEY_RIGHT': Command.RIGHT,
        'KEY_UP': Command.UP,
        'KEY_DOWN': Command.DOWN,
        'KEY_ESCAPE': Command.STOP,
    }

    CHARACTERS = {
        ' ': Command.FIRE,
        'c': Command.CLEAR,
        'q': Command.STOP,
    }

    def translate(self, key) -> Optional[Command]:
        """Map a single key from inkey() to a command, or None if unbound."""
        if key is None or not key:
            return None

        if key.is_sequence:
            return self.KEY_NAMES.get(key.name)

        return self.CHARACTERS.get(str(key).lower())

    def poll(self, surface) -> Optional[Command]:
        """
        Return the command for the next bound key, or None.

        Unbound keys are skipped. Keys after the first bound one stay
        queued for later ticks, so each tick applies at most one command.
        """
        key = surface.get_key_if_available()
        while key:
            command = self.translate(key)
            if command is not None:
                return command
            key = surface.get_key_if_available()
        return None
