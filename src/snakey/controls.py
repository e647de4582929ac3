# controls.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

import pygame  # type: ignore


class Action(Enum):
    # Declaration order is the row order of the keybind editor
    PAUSE = "PAUSE"
    RESUME = "RESUME"
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


DEFAULT_BINDINGS: Dict[Action, Tuple[int, ...]] = {
    Action.PAUSE:  (pygame.K_ESCAPE,),
    Action.RESUME: (pygame.K_ESCAPE,),
    Action.UP:     (pygame.K_UP, pygame.K_w),
    Action.DOWN:   (pygame.K_DOWN, pygame.K_s),
    Action.LEFT:   (pygame.K_LEFT, pygame.K_a),
    Action.RIGHT:  (pygame.K_RIGHT, pygame.K_d),
}

_KEY_LABELS = {
    pygame.K_ESCAPE: "ESC",
    pygame.K_UP:     "UP",
    pygame.K_DOWN:   "DOWN",
    pygame.K_LEFT:   "LEFT",
    pygame.K_RIGHT:  "RIGHT",
    pygame.K_w:      "W",
    pygame.K_a:      "A",
    pygame.K_s:      "S",
    pygame.K_d:      "D",
}


def key_label(key: int) -> str:
    return _KEY_LABELS.get(key, f"Key {key}")


# ---------- Per-frame input snapshot ----------
@dataclass(frozen=True)
class FrameInput:
    keys_down: FrozenSet[int] = frozenset()
    keys_pressed: Tuple[int, ...] = ()     # edges this frame, in event order
    mouse_pos: Tuple[int, int] = (-1, -1)
    mouse_pressed: bool = False            # primary button went down this frame
    mouse_down: bool = False               # primary button is held
    quit_requested: bool = False

    def is_key_down(self, key: int) -> bool:
        return key in self.keys_down

    def is_key_pressed(self, key: int) -> bool:
        return key in self.keys_pressed

    def first_key_pressed(self) -> Optional[int]:
        return self.keys_pressed[0] if self.keys_pressed else None

    def clicked(self, rect: pygame.Rect) -> bool:
        return self.mouse_pressed and rect.collidepoint(self.mouse_pos)

    def held_over(self, rect: pygame.Rect) -> bool:
        return self.mouse_down and rect.collidepoint(self.mouse_pos)


# ---------- Bindings ----------
@dataclass
class KeyBindings:
    """Logical action -> physical keys. Any bound key satisfies the action."""

    bindings: Dict[Action, List[int]] = field(
        default_factory=lambda: {a: list(keys) for a, keys in DEFAULT_BINDINGS.items()}
    )

    def keys(self, action: Action) -> Tuple[int, ...]:
        return tuple(self.bindings[action])

    def primary(self, action: Action) -> int:
        return self.bindings[action][0]

    def rebind(self, action: Action, key: int) -> None:
        self.bindings[action] = [key]

    def is_action_down(self, action: Action, frame: FrameInput) -> bool:
        return any(frame.is_key_down(k) for k in self.bindings[action])

    def is_action_pressed(self, action: Action, frame: FrameInput) -> bool:
        return any(frame.is_key_pressed(k) for k in self.bindings[action])


# ---------- pygame input source ----------
class PygameInput:
    """Drains the pygame event queue once per frame into a FrameInput."""

    def __init__(self) -> None:
        self._held: Set[int] = set()

    def poll(self) -> FrameInput:
        pressed: List[int] = []
        mouse_pressed = False
        quit_requested = False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_UNKNOWN:
                    continue  # no usable key code
                self._held.add(event.key)
                pressed.append(event.key)
            elif event.type == pygame.KEYUP:
                self._held.discard(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mouse_pressed = True

        return FrameInput(
            keys_down=frozenset(self._held),
            keys_pressed=tuple(pressed),
            mouse_pos=pygame.mouse.get_pos(),
            mouse_pressed=mouse_pressed,
            mouse_down=bool(pygame.mouse.get_pressed()[0]),
            quit_requested=quit_requested,
        )
