import argparse
import logging
import sys
import time
from typing import List, Optional

import pygame

from config import GameConfig
from domain.constants import DEFAULT_FPS, DEFAULT_TICK_SECONDS, GameStatus
from domain.grid import GridSimulation
from players import KeyboardPlayer, Player, RandomPlayer
from services.grid_renderer import GridRenderer

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Drives a GridSimulation in real time:
      - Samples the player for a direction
      - Advances the grid once per tick
      - Redraws the window (when there is one)
    """
    def __init__(
        self,
        grid: GridSimulation,
        player: Player,
        renderer: Optional[GridRenderer] = None,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        fps: int = DEFAULT_FPS,
        max_ticks: Optional[int] = None
    ):
        self.grid = grid
        self.player = player
        self.renderer = renderer
        self.tick_seconds = tick_seconds
        self.fps = fps
        self.max_ticks = max_ticks
        self.window_open = renderer is not None

    @property
    def finished(self) -> bool:
        if self.grid.is_over:
            return True
        return self.max_ticks is not None and self.grid.tick >= self.max_ticks

    def run_tick(self):
        """
        Execute one tick: ask the player for a move and play it.
        """
        if self.grid.is_over:
            logger.warning("Game is already over. No more ticks.")
            return

        move = self.player.get_move(self.grid.get_current_state())
        self.grid.play_move(move)
        logger.debug(f"Tick {self.grid.tick}: move={move.value if move else None}, status={self.grid.status.name}")

    def run(self) -> GameStatus:
        """Play until the game ends (or the window closes) and return the final status."""
        if self.renderer is None:
            return self._run_headless()
        return self._run_windowed()

    def _run_headless(self) -> GameStatus:
        while not self.finished:
            self.run_tick()
            logger.debug("\n" + self.grid.get_current_state().print_board() + "\n")
            if not self.finished:
                time.sleep(self.tick_seconds)

        self._log_result()
        return self.grid.status

    def _run_windowed(self) -> GameStatus:
        clock = pygame.time.Clock()
        delay_ms = self.tick_seconds * 1000
        last_tick = pygame.time.get_ticks()
        self._redraw()

        while self.window_open and not self.finished:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.window_open = False
            if not self.window_open:
                logger.info("Window closed by player")
                break

            # Input between ticks still steers the snake
            self.grid.turn(self.player.get_move(self.grid.get_current_state()))
            clock.tick(self.fps)

            now = pygame.time.get_ticks()
            if now - last_tick < delay_ms:
                continue

            self.run_tick()
            self._redraw()
            last_tick = now

        self._log_result()
        return self.grid.status

    def _redraw(self):
        self.renderer.draw(self.grid.get_current_state())
        pygame.display.flip()

    def _log_result(self):
        state = self.grid.get_current_state()
        if state.status == GameStatus.WIN:
            logger.info(f"Game Over: the snake filled the board in {state.tick} ticks.")
        elif state.status == GameStatus.LOSS:
            logger.info(f"Game Over: {state.death_reason} collision on tick {state.tick}, length {state.length}.")
        else:
            logger.info(f"Stopped after {state.tick} ticks with the game still in progress.")


# -------------------------------
# Main Entry Point
# -------------------------------
def build_parser(config: GameConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake on a fixed-size grid."
    )
    parser.add_argument("--width", type=int, default=config.width,
                        help=f"Width of the board in cells (default: {config.width})")
    parser.add_argument("--height", type=int, default=config.height,
                        help=f"Height of the board in cells (default: {config.height})")
    parser.add_argument("--tick-seconds", type=float, default=config.tick_seconds,
                        help=f"Seconds between simulation ticks (default: {config.tick_seconds})")
    parser.add_argument("--autoplay", action="store_true",
                        help="Let a random safe-move player steer instead of the keyboard")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window, logging the board each tick at DEBUG level (implies --autoplay)")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks even if the game is still in progress")
    parser.add_argument("--log-level", type=str, default=config.log_level,
                        help=f"Logging level (default: {config.log_level})")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    renderer = None
    try:
        config = GameConfig.from_env()
        args = build_parser(config).parse_args(argv)
        logging.getLogger().setLevel(args.log_level.upper())

        grid = GridSimulation(width=args.width, height=args.height)
        if args.headless:
            player = RandomPlayer()
        else:
            renderer = GridRenderer.open_window(args.width, args.height, config)
            player = RandomPlayer() if args.autoplay else KeyboardPlayer()

        game = SnakeGame(
            grid=grid,
            player=player,
            renderer=renderer,
            tick_seconds=args.tick_seconds,
            fps=config.fps,
            max_ticks=args.max_ticks
        )
        status = game.run()

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        if renderer is not None:
            pygame.quit()

    # Final status as InProgress=0, Win=1, Loss=2
    print(int(status))
    return int(status)


if __name__ == "__main__":
    sys.exit(main())
