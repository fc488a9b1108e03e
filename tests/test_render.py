import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from gridsnake.config import DARKGREEN, GOLD, LIME, WHITE  # noqa: E402
from gridsnake.game import GameState  # noqa: E402
from gridsnake.render import draw_game, draw_game_over  # noqa: E402


@pytest.fixture
def canvas():
    pygame.init()
    yield pygame.Surface((400, 300)), pygame.font.SysFont(None, 30)
    pygame.quit()


def color_at(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_draw_game_paints_head_body_and_target(canvas):
    screen, font = canvas
    state = GameState(target=(9, 9), head=(5, 7), body=[(4, 7)], score=300)

    draw_game(screen, font, state)

    # 400x300 -> board at (60, 10), 20px cells; sample cell centres
    assert color_at(screen, 170, 160) == DARKGREEN
    assert color_at(screen, 150, 160) == LIME
    assert color_at(screen, 250, 200) == GOLD


def test_draw_game_over_clears_screen(canvas):
    screen, font = canvas
    screen.fill((0, 0, 0))

    draw_game_over(screen, font, 1200)

    assert color_at(screen, 0, 0) == WHITE
    assert color_at(screen, 399, 299) == WHITE
