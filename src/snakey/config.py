from dataclasses import dataclass
from enum import Enum

# ----- Window & grid -----
BLOCK_SIZE = 20
GRID_W, GRID_H = 40, 30
WIDTH, HEIGHT = GRID_W * BLOCK_SIZE, GRID_H * BLOCK_SIZE
FPS = 60
TITLE = "SNAKEY"

# ----- Menus -----
BUTTON_W, BUTTON_H = 200, 50
BUTTON_FONT = 30

# ----- Colors -----
BG        = (245, 245, 245)
GREEN     = (0, 228, 48)
RED       = (230, 41, 55)
MAROON    = (190, 33, 55)
DARKBLUE  = (0, 82, 172)
DARKGRAY  = (80, 80, 80)
GRAY      = (130, 130, 130)
LIGHTGRAY = (200, 200, 200)
BLACK     = (0, 0, 0)
VEIL      = (245, 245, 245, 204)  # translucent BG over the paused board

# ----- Setting ranges -----
MIN_SNAKE_LENGTH, MAX_SNAKE_LENGTH = 1, 10
MIN_TICK_MS, MAX_TICK_MS = 50, 500
COUNTDOWN_MS = 3000


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


# ----- Tunables (what the settings screen edits) -----
@dataclass
class Config:
    initial_snake_length: int = 3
    tick_rate_ms: int = 100
    wrapping_enabled: bool = True

    def __post_init__(self):
        if not MIN_SNAKE_LENGTH <= self.initial_snake_length <= MAX_SNAKE_LENGTH:
            raise ValueError(f"initial_snake_length out of range: {self.initial_snake_length}")
        if not MIN_TICK_MS <= self.tick_rate_ms <= MAX_TICK_MS:
            raise ValueError(f"tick_rate_ms out of range: {self.tick_rate_ms}")
