from dataclasses import dataclass
from typing import Optional, Tuple
import logging

# ----- Grid & window -----
GRID_SIZE = 14
WIDTH, HEIGHT = 800, 600
MARGIN = 10

# ----- Colors -----
LIGHTGRAY = (200, 200, 200)
WHITE     = (255, 255, 255)
DARKGREEN = (0, 117, 44)
LIME      = (0, 158, 47)
GOLD      = (255, 203, 0)
DARKGRAY  = (80, 80, 80)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Tunables (the single speed curve lives here) -----
@dataclass(frozen=True)
class Config:
    grid_size: int = GRID_SIZE
    initial_speed: float = 0.3         # seconds between ticks
    speed_decay: float = 0.99          # multiplied into speed per target
    target_bonus: int = 100
    min_speed: Optional[float] = None  # no floor unless set
    avoid_body: bool = False           # rejection-sample targets off the body
    seed: Optional[int] = None
    fps: int = 60
    window_size: Tuple[int, int] = (WIDTH, HEIGHT)

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.initial_speed <= 0:
            raise ValueError(f"initial_speed must be positive, got {self.initial_speed}")
        if not 0 < self.speed_decay <= 1:
            raise ValueError(f"speed_decay must be in (0, 1], got {self.speed_decay}")
        if self.target_bonus < 0:
            raise ValueError(f"target_bonus must be non-negative, got {self.target_bonus}")
        if self.min_speed is not None and self.min_speed < 0:
            raise ValueError(f"min_speed must be non-negative, got {self.min_speed}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

CFG = Config()


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the game process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
