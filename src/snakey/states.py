# states.py
import random
from enum import Enum, auto
from typing import Callable, Dict, Optional, Tuple

from .config import (
    Config, Direction, BG, COUNTDOWN_MS,
    MIN_SNAKE_LENGTH, MAX_SNAKE_LENGTH, MIN_TICK_MS, MAX_TICK_MS,
)
from .controls import Action, FrameInput, KeyBindings
from .game import Snake, Food, TickScheduler, in_bounds, wrap_cell
from . import layout, screens


class GameState(Enum):
    START_MENU = auto()
    SETTINGS = auto()
    KEYBINDS = auto()
    COUNTDOWN = auto()
    PLAYING = auto()
    PAUSE = auto()
    CONFIRM_RESTART = auto()
    CONFIRM_MAIN_MENU = auto()
    GAME_OVER = auto()


# Held-key steering is checked in this order; the first match wins
_STEERING = (
    (Action.UP, Direction.UP),
    (Action.DOWN, Direction.DOWN),
    (Action.LEFT, Direction.LEFT),
    (Action.RIGHT, Direction.RIGHT),
)


class GameStateMachine:
    """
    Owns the snake, the food, the key bindings and every timer. Each frame
    the loop calls update() once, then draw() once; both dispatch on the
    current state through the same table.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        now_ms: int = 0,
        rng: Optional[random.Random] = None,
        debug: bool = False,
    ) -> None:
        self.config = config if config is not None else Config()
        self.debug = debug
        self.app_state = GameState.START_MENU
        self.previous_state = GameState.START_MENU  # where Settings returns to
        self.running = True

        self.bindings = KeyBindings()
        self.editing: Optional[Action] = None  # keybind row awaiting a key
        self.snake = Snake(self.config.initial_snake_length)
        self.food = Food(rng)
        self.ticks = TickScheduler(now_ms)
        self.countdown_start_ms = now_ms
        self.best_length = 0

        # Last frame seen by update(); draw() reads it for hover and countdown
        self.frame = FrameInput()
        self.now_ms = now_ms

        self._table: Dict[GameState, Tuple[Callable[[], None], Callable]] = {
            GameState.START_MENU:        (self._update_start_menu, screens.draw_start_menu),
            GameState.SETTINGS:          (self._update_settings, screens.draw_settings),
            GameState.KEYBINDS:          (self._update_keybinds, screens.draw_keybinds),
            GameState.COUNTDOWN:         (self._update_countdown, screens.draw_countdown),
            GameState.PLAYING:           (self._update_playing, screens.draw_playing),
            GameState.PAUSE:             (self._update_pause, screens.draw_pause),
            GameState.CONFIRM_RESTART:   (self._update_confirm_restart, screens.draw_confirm_restart),
            GameState.CONFIRM_MAIN_MENU: (self._update_confirm_main_menu, screens.draw_confirm_main_menu),
            GameState.GAME_OVER:         (self._update_game_over, screens.draw_game_over),
        }

    # ---------- frame entry points ----------
    def update(self, frame: FrameInput, now_ms: int) -> None:
        self.frame = frame
        self.now_ms = now_ms
        update_fn, _ = self._table[self.app_state]
        update_fn()

    def draw(self, renderer) -> None:
        _, draw_fn = self._table[self.app_state]
        renderer.begin_frame()
        renderer.clear(BG)
        draw_fn(renderer, self)
        renderer.end_frame()

    # ---------- helpers ----------
    def _set_state(self, state: GameState) -> None:
        if self.debug:
            print(f"[STATE] {self.app_state.name} -> {state.name}")
        self.app_state = state

    def _start_round(self) -> None:
        """Fresh snake, fresh food, tick clock restarted; then play."""
        self.snake = Snake(self.config.initial_snake_length)
        self.food.respawn()
        self.ticks.reset(self.now_ms)
        self._set_state(GameState.PLAYING)

    def _game_over(self, reason: str) -> None:
        length = self.snake.get_length()
        self.best_length = max(self.best_length, length)
        if self.debug:
            print(f"[GAME OVER] reason={reason}, length={length}, best={self.best_length}")
        self._set_state(GameState.GAME_OVER)

    def countdown_remaining_ms(self) -> int:
        return max(0, COUNTDOWN_MS - (self.now_ms - self.countdown_start_ms))

    # ---------- per-state update ----------
    def _update_start_menu(self) -> None:
        buttons = layout.start_menu_buttons()
        if self.frame.clicked(buttons["PLAY"]):
            self.countdown_start_ms = self.now_ms
            self._set_state(GameState.COUNTDOWN)
        elif self.frame.clicked(buttons["SETTINGS"]):
            self.previous_state = GameState.START_MENU
            self._set_state(GameState.SETTINGS)
        elif self.frame.clicked(buttons["QUIT"]):
            self.running = False

    def _update_settings(self) -> None:
        frame = self.frame
        # Sliders follow the pointer for as long as the button is held
        if frame.mouse_down:
            mx = frame.mouse_pos[0]
            if layout.slider_hit(layout.LENGTH_SLIDER, frame.mouse_pos):
                self.config.initial_snake_length = layout.slider_value(
                    layout.LENGTH_SLIDER, mx, MIN_SNAKE_LENGTH, MAX_SNAKE_LENGTH
                )
            if layout.slider_hit(layout.TICK_SLIDER, frame.mouse_pos):
                self.config.tick_rate_ms = layout.slider_value(
                    layout.TICK_SLIDER, mx, MIN_TICK_MS, MAX_TICK_MS
                )

        if frame.clicked(layout.WRAP_CHECKBOX):
            self.config.wrapping_enabled = not self.config.wrapping_enabled
        if frame.clicked(layout.KEYBINDS_BUTTON):
            self._set_state(GameState.KEYBINDS)
        if frame.clicked(layout.BACK_BUTTON):
            self._set_state(self.previous_state)

    def _update_keybinds(self) -> None:
        frame = self.frame
        if frame.mouse_pressed:
            for action, row in layout.keybind_rows().items():
                if row.collidepoint(frame.mouse_pos):
                    self.editing = action
                    break
            if frame.clicked(layout.BACK_BUTTON):
                self._set_state(GameState.SETTINGS)

        if self.editing is not None:
            key = frame.first_key_pressed()
            if key is not None:
                self.bindings.rebind(self.editing, key)
                self.editing = None

    def _update_countdown(self) -> None:
        if self.now_ms - self.countdown_start_ms >= COUNTDOWN_MS:
            self._start_round()

    def _update_playing(self) -> None:
        if self.bindings.is_action_pressed(Action.PAUSE, self.frame):
            self._set_state(GameState.PAUSE)
            return

        # Steering is read every frame, movement only on a tick
        for action, direction in _STEERING:
            if self.bindings.is_action_down(action, self.frame):
                self.snake.set_direction(direction)
                break

        if not self.ticks.due(self.now_ms, self.config.tick_rate_ms):
            return

        self.snake.update()
        head = self.snake.get_head()
        if not in_bounds(head):
            if not self.config.wrapping_enabled:
                self._game_over("wall")
                return
            head = wrap_cell(head)
            self.snake.set_head(head)

        if self.snake.has_self_collision():
            self._game_over("self")
            return

        if head == self.food.get_position():
            self.snake.grow()
            self.food.respawn()

    def _update_pause(self) -> None:
        buttons = layout.pause_buttons()
        if self.frame.clicked(buttons["RESUME"]):
            self._set_state(GameState.PLAYING)
        elif self.frame.clicked(buttons["SETTINGS"]):
            self.previous_state = GameState.PAUSE
            self._set_state(GameState.SETTINGS)
        elif self.frame.clicked(buttons["RESTART"]):
            self._set_state(GameState.CONFIRM_RESTART)
        elif self.frame.clicked(buttons["MAIN MENU"]):
            self._set_state(GameState.CONFIRM_MAIN_MENU)

        # The resume key overrides any button clicked on the same frame
        if self.bindings.is_action_pressed(Action.RESUME, self.frame):
            self._set_state(GameState.PLAYING)

    def _update_confirm_restart(self) -> None:
        yes, no = layout.confirm_buttons()
        if self.frame.clicked(yes):
            self._start_round()
        elif self.frame.clicked(no):
            self._set_state(GameState.PAUSE)

    def _update_confirm_main_menu(self) -> None:
        yes, no = layout.confirm_buttons()
        if self.frame.clicked(yes):
            self._set_state(GameState.START_MENU)
        elif self.frame.clicked(no):
            self._set_state(GameState.PAUSE)

    def _update_game_over(self) -> None:
        if self.frame.mouse_pressed:
            self._set_state(GameState.START_MENU)
