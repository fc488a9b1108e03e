# game.py
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Collection, Deque, Optional, Tuple
import random

from .config import CFG, Config, GRID_SIZE, UP, DOWN, LEFT, RIGHT

Position = Tuple[int, int]
PositionGenerator = Callable[[], Position]

# Held keys are resolved in this order; first acceptable one wins.
INPUT_PRIORITY = (RIGHT, LEFT, UP, DOWN)

MAX_SPAWN_ATTEMPTS = 1000

# ---------- Helpers ----------
class RandomPositions:
    """Uniform random cells on a square grid, optionally seeded."""

    def __init__(self, grid_size: int = GRID_SIZE, seed: Optional[int] = None):
        self.grid_size = grid_size
        self.rng = random.Random(seed)

    def __call__(self) -> Position:
        return (self.rng.randrange(self.grid_size), self.rng.randrange(self.grid_size))

def is_opposite(a: Position, b: Position) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(pos: Position, grid_size: int) -> bool:
    return 0 <= pos[0] < grid_size and 0 <= pos[1] < grid_size

# ---------- Outcome ----------
@dataclass
class TickOutcome:
    grew: bool = False
    game_over: bool = False
    reason: Optional[str] = None   # "wall" | "self" once game_over

# ---------- State ----------
@dataclass
class GameState:
    """
    The whole session: head, body, direction, target, score and speed.

    body holds former head cells, most recent at the left end and the tail
    at the right end; head is kept out of it so collisions are a membership test.
    """
    target: Position
    head: Position = (0, 0)
    direction: Position = RIGHT
    body: Deque[Position] = field(default_factory=deque)
    score: int = 0
    speed: Optional[float] = None       # seconds between ticks; None -> cfg.initial_speed
    navigation_lock: bool = False
    game_over: bool = False
    death_reason: Optional[str] = None
    last_tick: float = 0.0              # time of last tick (or reset)
    cfg: Config = CFG

    def __post_init__(self):
        if self.speed is None:
            self.speed = self.cfg.initial_speed
        self.body = deque(self.body)

    # ----- input -----
    def apply_input(self, pressed: Collection[Position]) -> bool:
        """
        Accept at most one direction change per tick; never a 180° turn.
        Returns True when a direction was latched.
        """
        if self.game_over or self.navigation_lock:
            return False
        for cand in INPUT_PRIORITY:
            if cand in pressed and not is_opposite(cand, self.direction):
                self.direction = cand
                self.navigation_lock = True
                return True
        return False

    # ----- update -----
    def tick(self, now: float, rng: PositionGenerator) -> TickOutcome:
        """Advance one grid step. The caller decides when a tick is due."""
        if self.game_over:
            return TickOutcome(game_over=True, reason=self.death_reason)

        self.body.appendleft(self.head)
        dx, dy = self.direction
        self.head = (self.head[0] + dx, self.head[1] + dy)

        grew = self.head == self.target
        if grew:
            self.target = self._spawn_target(rng)
            self.score += self.cfg.target_bonus
            self.speed *= self.cfg.speed_decay
            if self.cfg.min_speed is not None:
                self.speed = max(self.cfg.min_speed, self.speed)
        else:
            self.body.pop()

        # Wall collision
        if not in_bounds(self.head, self.cfg.grid_size):
            self._lose("wall")

        # Self collision
        if self.head in self.body:
            self._lose("self")

        self.navigation_lock = False
        self.last_tick = now
        return TickOutcome(grew=grew, game_over=self.game_over, reason=self.death_reason)

    def reset(self, rng: PositionGenerator, now: float = 0.0) -> None:
        self.head = (0, 0)
        self.direction = RIGHT
        self.body = deque()
        self.score = 0
        self.speed = self.cfg.initial_speed
        self.navigation_lock = False
        self.game_over = False
        self.death_reason = None
        self.last_tick = now
        self.target = self._spawn_target(rng)

    # ----- internals -----
    def _lose(self, reason: str) -> None:
        self.game_over = True
        if self.death_reason is None:
            self.death_reason = reason

    def _spawn_target(self, rng: PositionGenerator) -> Position:
        target = rng()
        if not self.cfg.avoid_body:
            return target
        occupied = set(self.body)
        occupied.add(self.head)
        if len(occupied) >= self.cfg.grid_size ** 2:
            return target  # board is full, nowhere free to go
        for _ in range(MAX_SPAWN_ATTEMPTS):
            if target not in occupied:
                return target
            target = rng()
        # Unlucky draws: pick straight from what is left
        n = self.cfg.grid_size
        free = [(x, y) for y in range(n) for x in range(n) if (x, y) not in occupied]
        chooser = rng.rng if isinstance(rng, RandomPositions) else random
        return chooser.choice(free)

def new_game_state(rng: PositionGenerator, cfg: Config = CFG, now: float = 0.0) -> GameState:
    state = GameState(target=(0, 0), cfg=cfg)
    state.reset(rng, now)
    return state
