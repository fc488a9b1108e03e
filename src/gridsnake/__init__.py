"""Single-player grid snake: game core plus a pygame front end."""

from gridsnake.clock import GameClock
from gridsnake.game import GameState, RandomPositions, TickOutcome, new_game_state
from gridsnake.session import Session

__all__ = ["GameClock", "GameState", "RandomPositions", "TickOutcome", "new_game_state", "Session"]
