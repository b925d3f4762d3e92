"""
Game Configuration
===================
Fixed constants for the playfield, pacing and spawning, plus the
file-based logging setup (the terminal itself belongs to the renderer).
"""

import logging


# =============================================================================
# PLAYFIELD
# =============================================================================

DEFAULT_ROWS = 24
DEFAULT_COLS = 48
TARGET_FPS = 30

# =============================================================================
# ENTITIES
# =============================================================================

PLAYER_HP = 5
ENEMY_HP = 1

WAVE_SIZE = 8
WAVE_ROW = 1
WAVE_FIRST_COL = 1
WAVE_SPACING = 6

# Burst size grows by one projectile every N kills
KILLS_PER_EXTRA_PROJECTILE = 4
# Burst shifts one column left every N kills
KILLS_PER_BURST_SHIFT = 8

# =============================================================================
# LOGGING
# =============================================================================

LOG_PATH = 'grid_shooter.log'
LOG_LEVEL = 'INFO'
LOG_FORMAT = '[%(asctime)s][%(levelname)s] %(name)s: %(message)s'


def configure_logging(path: str = LOG_PATH, level: str = LOG_LEVEL) -> logging.Logger:
    """
    Route the package loggers to a file.

    Safe to call more than once; the handler is only installed the first time.
    """
    logger = logging.getLogger('grid_shooter')
    logger.setLevel(level.upper())

    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(path)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger
