from __future__ import annotations

from typing import Callable, Dict

import pygame

from entanglement_rl.game import EntanglementGame, GameOverError
from .renderer import Renderer


KEY_TO_MOVE: Dict[int, Callable[[EntanglementGame], object]] = {
    pygame.K_RIGHT: EntanglementGame.rotate_upcoming_right,
    pygame.K_LEFT: EntanglementGame.rotate_upcoming_left,
    pygame.K_UP: EntanglementGame.use_pocket,
    pygame.K_DOWN: EntanglementGame.use_pocket,
    pygame.K_SPACE: EntanglementGame.place_tile,
    pygame.K_RETURN: EntanglementGame.place_tile,
}


def run() -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = EntanglementGame()
        renderer = Renderer(hex_size=28)

        board_w, board_h = renderer.board_pixel_size(game.board)
        side_panel_w = 8 * renderer.hex_size
        screen = pygame.display.set_mode((board_w + side_panel_w, board_h))
        pygame.display.set_caption("Entanglement - Human Play")
        font = pygame.font.SysFont(None, 24)
        last_points = 0

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        game.reset()
                        last_points = 0
                    else:
                        move = KEY_TO_MOVE.get(event.key)
                        if move is not None and not game.is_game_over():
                            try:
                                result = move(game)
                            except GameOverError:
                                continue
                            if isinstance(result, int):
                                last_points = result

            renderer.draw(screen, game)

            info_lines = [
                f"Score: {game.score}",
                f"Last: +{last_points}",
                f"Preview: +{game.preview_points() if not game.is_game_over() else 0}",
                "Rotate: Left/Right",
                "Pocket: Up/Down",
                "Place: Space/Enter",
                "Restart: R",
            ]
            x_text = board_w + renderer.margin
            y_text = renderer.margin + renderer.hex_size * 6
            for i, txt in enumerate(info_lines):
                img = font.render(txt, True, (230, 230, 230))
                screen.blit(img, (x_text, y_text + i * 20))
            if game.is_game_over():
                over = font.render("Game Over - Press R to restart, ESC to quit", True, (255, 100, 100))
                screen.blit(over, (renderer.margin, 2))

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
