# session.py
from dataclasses import dataclass
from typing import Collection, Optional
import logging

from .clock import GameClock
from .config import CFG, Config
from .game import GameState, Position, PositionGenerator, RandomPositions, TickOutcome, new_game_state

logger = logging.getLogger(__name__)


@dataclass
class FrameResult:
    ticked: bool = False
    outcome: Optional[TickOutcome] = None
    restarted: bool = False


class Session:
    """
    One running game as seen by the host loop.

    Each frame the host hands over the held directions, the restart key and
    optionally the time; afterwards it reads ``state`` to draw.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        clock: Optional[GameClock] = None,
        rng: Optional[PositionGenerator] = None,
    ):
        self.cfg = cfg
        self.clock = clock or GameClock()
        self.rng = rng or RandomPositions(cfg.grid_size, cfg.seed)
        self.state: GameState = new_game_state(self.rng, cfg, now=self.clock.now())
        logger.info("New session on a %dx%d grid, target at %s",
                    cfg.grid_size, cfg.grid_size, self.state.target)

    def frame(self, pressed: Collection[Position], restart: bool, now: Optional[float] = None) -> FrameResult:
        if now is None:
            now = self.clock.now()

        if self.state.game_over:
            if restart:
                self.state.reset(self.rng, now)
                logger.info("Restarted, target at %s", self.state.target)
                return FrameResult(restarted=True)
            return FrameResult()

        self.state.apply_input(pressed)
        if not self.clock.is_due(self.state, now):
            return FrameResult()

        outcome = self.state.tick(now, self.rng)
        if outcome.grew:
            logger.debug("Target eaten: score=%d speed=%.4f next target=%s",
                         self.state.score, self.state.speed, self.state.target)
        if outcome.game_over:
            logger.info("Game over (%s) at %s, score %d, length %d",
                        outcome.reason, self.state.head, self.state.score, len(self.state.body) + 1)
        return FrameResult(ticked=True, outcome=outcome)
