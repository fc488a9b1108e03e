# controls.py
from typing import Set, Tuple
import pygame # type: ignore

from .config import UP, DOWN, LEFT, RIGHT

KEYMAP = {
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
    pygame.K_LEFT:  LEFT,  pygame.K_a: LEFT,
    pygame.K_UP:    UP,    pygame.K_w: UP,
    pygame.K_DOWN:  DOWN,  pygame.K_s: DOWN,
}

RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def held_directions(keys) -> Set[Tuple[int, int]]:
    """Directions currently held in a pygame.key.get_pressed() snapshot."""
    return {d for key, d in KEYMAP.items() if keys[key]}

def restart_held(keys) -> bool:
    return any(keys[key] for key in RESTART_KEYS)
