# layout.py
"""Fixed panel geometry for the menus. Shared by the update and draw sides."""
from typing import Dict, Tuple

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, BUTTON_W, BUTTON_H
from .controls import Action

BUTTON_SPACING = 20
PAUSE_TITLE_Y, PAUSE_TITLE_SIZE = 80, 60

# ----- Settings widgets -----
LENGTH_SLIDER = pygame.Rect(100, 150, 200, 10)
TICK_SLIDER = pygame.Rect(100, 250, 200, 10)
WRAP_CHECKBOX = pygame.Rect(100, 345, 20, 20)
KEYBINDS_BUTTON = pygame.Rect(100, 410, 200, 40)
BACK_BUTTON = pygame.Rect(WIDTH - 120, HEIGHT - 60, 100, 40)

# ----- Keybind editor -----
ROW_X, ROW_Y, ROW_SPACING, ROW_W, ROW_H = 100, 100, 50, 400, 40


def _button_column(labels, start_x: int, start_y: int) -> Dict[str, pygame.Rect]:
    return {
        label: pygame.Rect(start_x, start_y + i * (BUTTON_H + BUTTON_SPACING), BUTTON_W, BUTTON_H)
        for i, label in enumerate(labels)
    }


def start_menu_buttons() -> Dict[str, pygame.Rect]:
    labels = ("PLAY", "SETTINGS", "QUIT")
    total = len(labels) * BUTTON_H + (len(labels) - 1) * BUTTON_SPACING
    return _button_column(labels, WIDTH // 2 - BUTTON_W // 2, (HEIGHT - total) // 2)


def pause_buttons() -> Dict[str, pygame.Rect]:
    labels = ("RESUME", "SETTINGS", "RESTART", "MAIN MENU")
    total = len(labels) * BUTTON_H + (len(labels) - 1) * BUTTON_SPACING
    title_bottom = PAUSE_TITLE_Y + PAUSE_TITLE_SIZE
    available = HEIGHT - title_bottom - 20
    start_y = title_bottom + (available - total) // 2 + 20
    return _button_column(labels, WIDTH // 2 - BUTTON_W // 2, start_y)


def confirm_buttons() -> Tuple[pygame.Rect, pygame.Rect]:
    """(YES, NO) side by side under the dialog question."""
    y = HEIGHT // 2 + 40
    yes = pygame.Rect(WIDTH // 2 - BUTTON_W - 10, y, BUTTON_W, BUTTON_H)
    no = pygame.Rect(WIDTH // 2 + 10, y, BUTTON_W, BUTTON_H)
    return yes, no


def keybind_rows() -> Dict[Action, pygame.Rect]:
    return {
        action: pygame.Rect(ROW_X, ROW_Y + i * ROW_SPACING, ROW_W, ROW_H)
        for i, action in enumerate(Action)
    }


# ----- Sliders -----
def slider_hit(rect: pygame.Rect, pos: Tuple[int, int]) -> bool:
    # Inclusive on the right so the knob can reach the maximum
    x, y = pos
    return rect.left <= x <= rect.right and rect.top <= y < rect.bottom


def slider_value(rect: pygame.Rect, x: int, lo: int, hi: int) -> int:
    rel = (x - rect.x) / rect.width
    return max(lo, min(hi, lo + int(rel * (hi - lo))))


def slider_ratio(value: int, lo: int, hi: int) -> float:
    return (value - lo) / (hi - lo)
