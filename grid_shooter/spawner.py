"""
Wave Spawner
=============
Spawns a fresh row of enemies whenever the previous wave is cleared.
"""

import logging
import random
from typing import List

from .config import WAVE_FIRST_COL, WAVE_ROW, WAVE_SIZE, WAVE_SPACING
from .enemies import create_enemy
from .entity import Entity
from .point import Point


logger = logging.getLogger(__name__)

# Any palette colour except black
WAVE_COLORS = range(1, 16)


def wave_positions(count: int = WAVE_SIZE) -> List[Point]:
    """Evenly spaced slots across the top of the playfield."""
    return [Point(WAVE_ROW, WAVE_FIRST_COL + i * WAVE_SPACING) for i in range(count)]


def spawn_wave(game, rng: random.Random, count: int = WAVE_SIZE) -> List[Entity]:
    """Add a wave of randomly coloured enemies to the end of the roster."""
    wave = []
    for location in wave_positions(count):
        enemy = create_enemy(game, location, color=rng.choice(WAVE_COLORS))
        game.entities.add(enemy)
        wave.append(enemy)

    logger.info('Spawned wave of %d enemies', len(wave))
    return wave
