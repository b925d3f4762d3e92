#!/usr/bin/env python3
"""
GRID SHOOTER - Terminal Arcade Shooter
=======================================
Move along the bottom of the grid and shoot down waves of invaders.

Controls:
    ARROWS  - Move one cell
    SPACE   - Fire
    C       - Clear and repaint the screen
    Q/ESC   - Quit
"""

import logging
import random
import sys
import time
from typing import Optional

from .components import EntityKind
from .config import DEFAULT_COLS, DEFAULT_ROWS, TARGET_FPS, configure_logging
from .grid import Grid, InvalidDimension
from .player import MOVES, Command, InputHandler, create_player
from .projectiles import fire
from .roster import Roster
from .spawner import spawn_wave
from .systems import collision_system, expiry_system, movement_render_system
from .terminal import TerminalSurface


logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    'Press [Spacebar] to shoot.',
    'Press any key to start the game.',
)


# =============================================================================
# GAME STATE
# =============================================================================

class Game:
    """
    Owns the grid, the entity roster, the RNG and the kill count, and
    runs the tick loop: poll input, update, then sleep for what is left
    of the frame interval. A slow tick is not caught up afterwards.

    Construction spawns the player and the first wave and paints the
    first frame.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                 frames_per_second: int = TARGET_FPS,
                 surface: Optional[TerminalSurface] = None,
                 rng: Optional[random.Random] = None):
        self.surface = surface if surface is not None else TerminalSurface()
        self.grid = Grid(rows, cols, self.surface)
        self.max_row = rows - 1
        self.max_col = cols - 1
        self.frames_per_second = frames_per_second
        self.rng = rng if rng is not None else random.Random()

        self.running = False
        self.kill_count = 0
        self.tick = 0

        self.entities = Roster()
        self.player = self.entities.add(create_player(self))
        spawn_wave(self, self.rng)

        self.grid.initialize_window()
        self.update()

    def enemies(self):
        return list(self.entities.query(EntityKind.ENEMY))

    def projectiles(self):
        return list(self.entities.query(EntityKind.PROJECTILE))

    def update(self):
        """Run one tick: collide, retire, respawn, advance, draw, render."""
        hits = collision_system(self.entities)
        if hits:
            self.kill_count += len(hits)
            logger.info('Destroyed %d enemy(s), kills=%d', len(hits), self.kill_count)

        expiry_system(self.entities)

        if not self.entities.count(EntityKind.ENEMY):
            spawn_wave(self, self.rng)

        movement_render_system(self.entities)
        self.grid.render()
        self.tick += 1

    def key_action(self, command: Command):
        """Apply a single input command."""
        if command is Command.STOP:
            self.running = False
        elif command in MOVES:
            self.player.move(MOVES[command])
        elif command is Command.FIRE:
            fire(self, self.player, self.kill_count)
        elif command is Command.CLEAR:
            self.grid.clear()

    def handle_input(self, input_handler: InputHandler):
        """Apply at most one pending command; later keys wait for later ticks."""
        command = input_handler.poll(self.surface)
        if command is not None:
            self.key_action(command)

    def start(self, input_handler: Optional[InputHandler] = None,
              max_ticks: Optional[int] = None):
        """
        Run the loop until a STOP command (or max_ticks ticks).

        Each iteration polls input, updates, then sleeps for whatever is
        left of the frame interval.
        """
        if input_handler is None:
            input_handler = InputHandler()

        frame_time = 1.0 / self.frames_per_second
        ticks = 0
        self.running = True
        logger.info('Game loop started at %d FPS', self.frames_per_second)

        while self.running:
            now = time.perf_counter()

            self.handle_input(input_handler)
            self.update()

            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                self.running = False

            elapsed = time.perf_counter() - now
            sleep_time = frame_time - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        logger.info('Game loop stopped after %d ticks, kills=%d', ticks, self.kill_count)


# =============================================================================
# MAIN
# =============================================================================

def main() -> int:
    """Entry point. Shows the instructions, then runs the game until quit."""
    configure_logging()
    surface = TerminalSurface()
    term = surface.term

    for line in INSTRUCTIONS:
        print(line)
    with term.cbreak():
        term.inkey()

    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            try:
                game = Game(surface=surface)
                game.start()
            finally:
                surface.restore()
    except InvalidDimension as exc:
        logger.error('Cannot start: %s', exc)
        print(f'ERROR: {exc}', file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
