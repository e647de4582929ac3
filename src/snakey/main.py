# main.py
import pygame # type: ignore
from .config import WIDTH, HEIGHT, FPS, TITLE
from .controls import PygameInput
from .render import PygameRenderer
from .states import GameStateMachine

def main():
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    renderer = PygameRenderer(screen)
    controls = PygameInput()
    game = GameStateMachine(now_ms=pygame.time.get_ticks())

    while game.running:
        # 1) input
        frame = controls.poll()
        if frame.quit_requested:
            break

        # 2) update
        game.update(frame, pygame.time.get_ticks())
        if not game.running:
            break

        # 3) render
        game.draw(renderer)
        clock.tick(FPS)  # movement gated by the tick scheduler, not the frame rate

    pygame.quit()

if __name__ == "__main__":
    main()
