# main.py
import argparse
import dataclasses
import logging
from typing import List, Optional
import pygame # type: ignore

from .config import CFG, Config, configure_logging
from .controls import held_directions, restart_held
from .render import draw_game, draw_game_over
from .session import Session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Grid snake: eat targets, avoid walls and yourself.")
    p.add_argument("--grid-size", type=int, default=CFG.grid_size, help="Cells per side.")
    p.add_argument("--speed", type=float, default=CFG.initial_speed,
                   help="Initial seconds between moves.")
    p.add_argument("--min-speed", type=float, default=CFG.min_speed,
                   help="Floor for the move interval (default: none).")
    p.add_argument("--avoid-body", action="store_true",
                   help="Never spawn a target underneath the snake.")
    p.add_argument("--seed", type=int, default=CFG.seed, help="Seed for target placement.")
    p.add_argument("--fps", type=int, default=CFG.fps, help="Frame rate cap.")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p

def config_from_args(args: argparse.Namespace) -> Config:
    return dataclasses.replace(
        CFG,
        grid_size=args.grid_size,
        initial_speed=args.speed,
        min_speed=args.min_speed,
        avoid_body=args.avoid_body,
        seed=args.seed,
        fps=args.fps,
    )

def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))
    configure_logging(args.log_level)

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 30)
        screen = pygame.display.set_mode(cfg.window_size, pygame.RESIZABLE)
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()
        session = Session(cfg)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break

            keys = pygame.key.get_pressed()
            session.frame(held_directions(keys), restart_held(keys))

            if session.state.game_over:
                draw_game_over(screen, font, session.state.score)
            else:
                draw_game(screen, font, session.state)
            pygame.display.flip()
            clock.tick(cfg.fps)  # movement gated by the session, not the frame rate
    finally:
        pygame.quit()
    logger.info("Bye")

if __name__ == "__main__":
    main()
