# screens.py
"""
One draw routine per game state. Each takes the renderer and the state
machine and only reads from the machine.
"""
from typing import Tuple

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, BLOCK_SIZE, BUTTON_FONT, TITLE,
    GREEN, RED, MAROON, DARKBLUE, DARKGRAY, GRAY, LIGHTGRAY, BLACK, VEIL,
    MIN_SNAKE_LENGTH, MAX_SNAKE_LENGTH, MIN_TICK_MS, MAX_TICK_MS,
)
from .controls import key_label
from . import layout


# ---------- Helpers ----------
def button_color(rect: pygame.Rect, mouse_pos: Tuple[int, int]):
    """Hover highlight."""
    return GRAY if rect.collidepoint(mouse_pos) else LIGHTGRAY


def draw_centered(r, s: str, y: int, size: int, color) -> None:
    r.text(s, WIDTH // 2 - r.measure_text(s, size) // 2, y, size, color)


def draw_button(r, rect: pygame.Rect, label: str, mouse_pos, size: int = BUTTON_FONT) -> None:
    r.fill_rect(rect, button_color(rect, mouse_pos))
    tx = rect.x + (rect.width - r.measure_text(label, size)) // 2
    ty = rect.y + (rect.height - size) // 2
    r.text(label, tx, ty, size, BLACK)


def draw_cell(r, cell, color) -> None:
    gx, gy = cell
    r.fill_rect(pygame.Rect(gx * BLOCK_SIZE, gy * BLOCK_SIZE, BLOCK_SIZE, BLOCK_SIZE), color)


def draw_slider(r, rect: pygame.Rect, label: str, value: int, lo: int, hi: int) -> None:
    r.text(label, rect.x, rect.y - 40, 20, DARKGRAY)
    r.fill_rect(rect, LIGHTGRAY)
    knob_x = rect.x + int(layout.slider_ratio(value, lo, hi) * rect.width) - 5
    r.fill_rect(pygame.Rect(knob_x, rect.y - 5, 10, 20), DARKGRAY)
    r.text(str(value), rect.right + 20, rect.y - 5, 20, DARKBLUE)


def draw_confirm(r, question: str, mouse_pos) -> None:
    draw_centered(r, question, 100, 40, MAROON)
    yes, no = layout.confirm_buttons()
    draw_button(r, yes, "YES", mouse_pos)
    draw_button(r, no, "NO", mouse_pos)


# ---------- Per-state screens ----------
def draw_start_menu(r, game) -> None:
    draw_centered(r, TITLE, 80, 60, DARKBLUE)
    draw_centered(r, f"Best length: {game.best_length}", 150, 20, DARKBLUE)
    for label, rect in layout.start_menu_buttons().items():
        draw_button(r, rect, label, game.frame.mouse_pos)


def draw_settings(r, game) -> None:
    cfg = game.config
    draw_centered(r, "SETTINGS", 20, 40, DARKBLUE)
    draw_slider(r, layout.LENGTH_SLIDER, "INITIAL SNAKE LENGTH",
                cfg.initial_snake_length, MIN_SNAKE_LENGTH, MAX_SNAKE_LENGTH)
    draw_slider(r, layout.TICK_SLIDER, "TICK RATE (ms)",
                cfg.tick_rate_ms, MIN_TICK_MS, MAX_TICK_MS)

    box = layout.WRAP_CHECKBOX
    r.fill_rect(box, LIGHTGRAY)
    if cfg.wrapping_enabled:
        r.line(box.topleft, box.bottomright, DARKBLUE)
        r.line(box.bottomleft, box.topright, DARKBLUE)
    r.text("WRAPPING", box.right + 20, box.y, 20, DARKGRAY)

    draw_button(r, layout.KEYBINDS_BUTTON, "KEYBINDS", game.frame.mouse_pos)
    draw_button(r, layout.BACK_BUTTON, "BACK", game.frame.mouse_pos)


def draw_keybinds(r, game) -> None:
    draw_centered(r, "KEYBINDS", 20, 40, DARKBLUE)
    for action, row in layout.keybind_rows().items():
        r.fill_rect(row, LIGHTGRAY)
        r.text(action.value, row.x + 10, row.y + 5, 20, DARKBLUE)
        r.text(key_label(game.bindings.primary(action)), row.x + 250, row.y + 5, 20, MAROON)
        if game.editing is action:
            r.outline_rect(row, RED)
    draw_button(r, layout.BACK_BUTTON, "BACK", game.frame.mouse_pos)


def draw_countdown(r, game) -> None:
    secs = game.countdown_remaining_ms() // 1000
    draw_centered(r, f"Starting in {secs + 1}...", HEIGHT // 2 - 20, 40, DARKBLUE)


def draw_playing(r, game) -> None:
    draw_cell(r, game.food.get_position(), RED)
    for cell in game.snake.segments:
        draw_cell(r, cell, GREEN)
    r.text(f"Length: {game.snake.get_length()}", 8, 6, 20, DARKGRAY)


def draw_pause(r, game) -> None:
    draw_playing(r, game)
    r.fill_rect(pygame.Rect(0, 0, WIDTH, HEIGHT), VEIL)
    draw_centered(r, "PAUSED", layout.PAUSE_TITLE_Y, layout.PAUSE_TITLE_SIZE, DARKBLUE)
    for label, rect in layout.pause_buttons().items():
        draw_button(r, rect, label, game.frame.mouse_pos)


def draw_confirm_restart(r, game) -> None:
    draw_confirm(r, "Restart game?", game.frame.mouse_pos)


def draw_confirm_main_menu(r, game) -> None:
    draw_confirm(r, "Return to Main Menu?", game.frame.mouse_pos)


def draw_game_over(r, game) -> None:
    draw_centered(r, "GAME OVER", 100, 60, MAROON)
    draw_centered(r, f"Length: {game.snake.get_length()}", 200, 30, DARKBLUE)
    draw_centered(r, f"BEST LENGTH: {game.best_length}", 250, 30, DARKBLUE)
    draw_centered(r, "Click anywhere to return", 350, 20, DARKGRAY)
