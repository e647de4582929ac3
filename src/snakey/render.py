# render.py
from typing import Dict, Sequence, Tuple

import pygame  # type: ignore

Color = Sequence[int]  # RGB, or RGBA for translucent fills


class PygameRenderer:
    """
    The only thing that touches the window surface. Draw routines hand it
    rects, lines and text; it never reads or changes game state.
    """

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.SysFont(None, size)
            self._fonts[size] = font
        return font

    # ----- frame bracket -----
    def begin_frame(self) -> None:
        pass

    def end_frame(self) -> None:
        pygame.display.flip()

    # ----- primitives -----
    def clear(self, color: Color) -> None:
        self.screen.fill(color)

    def fill_rect(self, rect: pygame.Rect, color: Color) -> None:
        if len(color) == 4:
            # pygame.draw ignores alpha; blend through an SRCALPHA overlay
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill(color)
            self.screen.blit(overlay, rect.topleft)
        else:
            pygame.draw.rect(self.screen, color, rect)

    def outline_rect(self, rect: pygame.Rect, color: Color) -> None:
        pygame.draw.rect(self.screen, color, rect, width=1)

    def line(self, start: Tuple[int, int], end: Tuple[int, int], color: Color) -> None:
        pygame.draw.line(self.screen, color, start, end)

    def text(self, s: str, x: int, y: int, size: int, color: Color) -> None:
        self.screen.blit(self._font(size).render(s, True, color), (x, y))

    def measure_text(self, s: str, size: int) -> int:
        return self._font(size).size(s)[0]
