# render.py
from typing import Tuple
import pygame # type: ignore

from .config import LIGHTGRAY, WHITE, DARKGREEN, LIME, GOLD, DARKGRAY, MARGIN
from .game import GameState

LOSS_TEXT = "Game Over. Press [enter] to play again."


def board_geometry(width: int, height: int, grid_size: int) -> Tuple[float, float, float, float]:
    """Return (offset_x, offset_y, board_px, cell_px) for a centred square board."""
    game_size = min(width, height)
    offset_x = (width - game_size) / 2 + MARGIN
    offset_y = (height - game_size) / 2 + MARGIN
    board_px = game_size - 2 * MARGIN
    return offset_x, offset_y, board_px, board_px / grid_size

def draw_cell(screen: pygame.Surface, ox: float, oy: float, size: float,
              gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(round(ox + gx * size), round(oy + gy * size), round(size), round(size))
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    width, height = screen.get_size()
    n = state.cfg.grid_size
    ox, oy, board, size = board_geometry(width, height, n)

    screen.fill(LIGHTGRAY)
    pygame.draw.rect(screen, WHITE, pygame.Rect(round(ox), round(oy), round(board), round(board)))

    # grid lines
    for i in range(1, n):
        pygame.draw.line(screen, LIGHTGRAY, (ox, oy + size * i), (ox + board, oy + size * i), 2)
        pygame.draw.line(screen, LIGHTGRAY, (ox + size * i, oy), (ox + size * i, oy + board), 2)

    draw_cell(screen, ox, oy, size, state.head[0], state.head[1], DARKGREEN)
    for x, y in state.body:
        draw_cell(screen, ox, oy, size, x, y, LIME)
    draw_cell(screen, ox, oy, size, state.target[0], state.target[1], GOLD)

    txt = font.render(f"Score {state.score}", True, DARKGRAY)
    screen.blit(txt, (20, 10))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    width, height = screen.get_size()
    screen.fill(WHITE)

    title = font.render(LOSS_TEXT, True, DARKGRAY)
    sco   = font.render(f"Score: {score}", True, DARKGRAY)

    screen.blit(title, title.get_rect(center=(width // 2, height // 2)))
    screen.blit(sco, sco.get_rect(center=(width // 2, height // 2 + 32)))
