# game.py
from typing import List, Optional, Tuple
import random

from .config import GRID_W, GRID_H, Direction

Cell = Tuple[int, int]

# One OS-seeded generator shared by every Food that isn't handed its own.
_shared_rng: Optional[random.Random] = None


# ---------- Helpers ----------
def shared_rng() -> random.Random:
    global _shared_rng
    if _shared_rng is None:
        _shared_rng = random.Random()
    return _shared_rng


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b


def in_bounds(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < GRID_W and 0 <= y < GRID_H


def wrap_cell(cell: Cell) -> Cell:
    """Bring an off-grid cell back in on the far side, each axis independently."""
    x, y = cell
    if x < 0:
        x = GRID_W - 1
    elif x >= GRID_W:
        x = 0
    if y < 0:
        y = GRID_H - 1
    elif y >= GRID_H:
        y = 0
    return (x, y)


# ---------- Snake ----------
class Snake:
    def __init__(self, length: int = 1) -> None:
        if length < 1:
            raise ValueError(f"snake length must be >= 1, got {length}")
        cx, cy = GRID_W // 2, GRID_H // 2
        # Head-first list
        self._body: List[Cell] = [(cx - i, cy) for i in range(length)]
        self.direction = Direction.RIGHT
        self.grow_pending = False

    @property
    def segments(self) -> Tuple[Cell, ...]:
        return tuple(self._body)

    def get_head(self) -> Cell:
        return self._body[0]

    def get_length(self) -> int:
        return len(self._body)

    def update(self) -> None:
        """Step one cell in the current direction; keep the tail if growth is pending."""
        hx, hy = self._body[0]
        dx, dy = self.direction.value
        self._body.insert(0, (hx + dx, hy + dy))
        if self.grow_pending:
            self.grow_pending = False
        else:
            self._body.pop()

    def set_head(self, cell: Cell) -> None:
        self._body[0] = cell

    def set_direction(self, direction: Direction) -> None:
        # Checked against the last direction set, not the last step taken
        if is_opposite(direction, self.direction):
            return
        self.direction = direction

    def grow(self) -> None:
        self.grow_pending = True

    def has_self_collision(self) -> bool:
        head = self._body[0]
        return head in self._body[1:]


# ---------- Food ----------
class Food:
    """
    A single cell of food. Respawns uniformly over the whole grid and may
    land under the snake's body; it stays there until the snake moves off.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng
        self.position: Cell = (0, 0)
        self.respawn()

    def get_position(self) -> Cell:
        return self.position

    def respawn(self) -> None:
        rng = self._rng if self._rng is not None else shared_rng()
        fx = rng.randrange(GRID_W)
        fy = rng.randrange(GRID_H)
        self.position = (fx, fy)


# ---------- Timing ----------
class TickScheduler:
    """
    Gates simulation steps to a fixed interval, independent of frame rate.
    On firing, last_ms jumps to `now_ms` (not last_ms + interval), so late
    frames stretch the cadence rather than bunching steps together.
    """

    def __init__(self, last_ms: int = 0) -> None:
        self.last_ms = last_ms

    def reset(self, now_ms: int) -> None:
        self.last_ms = now_ms

    def due(self, now_ms: int, interval_ms: int) -> bool:
        if now_ms - self.last_ms < interval_ms:
            return False  # not time to move yet
        self.last_ms = now_ms
        return True
