import argparse
import logging
import random
import sys
import threading
from typing import Callable, List, Optional, Set, Tuple, Union

from config import LOG_FORMAT, load_settings
from domain.constants import (
    Direction,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    FOOD_REWARD,
    INITIAL_LENGTH,
    INITIAL_DIRECTION,
    DEATH_SELF,
    DEATH_WALL,
    DEATH_BOARD_FULL,
)
from domain.game_state import GameState
from domain.snake import Snake
from players import Player, get_player_class, AVAILABLE_VARIANTS
from services.direction_inbox import DirectionInbox
from services.frame_renderer import FrameRecorder, FrameRenderer
from services.tick_scheduler import TickScheduler

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Single-player snake simulation advanced one tick at a time.

    Owns the snake body, current direction, food position and score.
    Direction requests are queued in a single-slot inbox and applied at the
    start of the next tick; tick(), restart() and snapshots are serialized
    by one lock so an input thread can share the loop with the scheduler.
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        if width < INITIAL_LENGTH or height < 1:
            raise ValueError(
                f"Board {width}x{height} is too small; need at least "
                f"{INITIAL_LENGTH}x1 for the starting snake."
            )
        self.width = width
        self.height = height
        self.rng = rng or random.Random()

        self._lock = threading.RLock()
        self._inbox = DirectionInbox()

        self.snake: Snake
        self.food: Optional[Tuple[int, int]] = None
        self.direction: Direction = INITIAL_DIRECTION
        self.score = 0
        self.running = False
        self.death_reason: Optional[str] = None
        self.tick_number = 0
        self.games_started = 0

        self.restart()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def restart(self) -> None:
        """Reset to a fresh 3-segment snake heading right, score 0, new food."""
        with self._lock:
            # Centered, shifted right on narrow boards so the tail stays on the grid
            cx = max(self.width // 2, INITIAL_LENGTH - 1)
            cy = self.height // 2
            self.snake = Snake([(cx - i, cy) for i in range(INITIAL_LENGTH)])
            self.direction = INITIAL_DIRECTION
            self.score = 0
            self.tick_number = 0
            self.death_reason = None
            self.running = True
            self._inbox.clear()
            self.food = None
            self._place_food()
            self.games_started += 1
            logger.debug("Started game #%s with food at %s", self.games_started, self.food)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def request_direction(self, direction: Union[Direction, str]) -> bool:
        """
        Ask for a direction change at the next tick.

        Unknown names, reversals and any request after the first accepted
        one in the same tick are ignored. Returns whether it was accepted.
        """
        if isinstance(direction, str):
            try:
                direction = Direction[direction.strip().upper()]
            except KeyError:
                return False
        if not isinstance(direction, Direction):
            return False
        # Read the direction under the loop lock so a tick cannot change it mid-check
        with self._lock:
            return self._inbox.offer(direction, self.direction)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """
        Advance the game by one step:
          1) Apply the pending direction request, if any
          2) Prepend the new head
          3) Eat the food (grow, score, relocate food) or drop the tail
          4) Check self collision, then wall collision
        """
        with self._lock:
            if not self.running:
                return

            requested = self._inbox.take()
            if requested is not None:
                self.direction = requested

            new_head = self.direction.step(self.snake.head)
            self.snake.grow_to(new_head)

            # Food before collisions so the cell vacated by the tail is free
            if new_head == self.food:
                self.score += FOOD_REWARD
                self._place_food()
            else:
                self.snake.drop_tail()

            self.tick_number += 1

            if self.running and self.snake.hits_itself():
                self._end_game(DEATH_SELF)
            elif self.running and not self._in_bounds(new_head):
                self._end_game(DEATH_WALL)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        with self._lock:
            return GameState(
                tick_number=self.tick_number,
                snake=list(self.snake.positions),
                food=self.food,
                direction=self.direction,
                score=self.score,
                running=self.running,
                width=self.width,
                height=self.height,
                death_reason=self.death_reason,
            )

    # ------------------------------------------------------------------
    # Food placement
    # ------------------------------------------------------------------

    def set_food(self, position: Tuple[int, int]) -> None:
        """Place the food at a specific cell."""
        position = tuple(position)
        with self._lock:
            if not self._in_bounds(position):
                raise ValueError(f"Food out of bounds at {position}.")
            if position in self.snake:
                raise ValueError(f"Food cannot be placed on the snake at {position}.")
            self.food = position

    def free_cells(self) -> List[Tuple[int, int]]:
        occupied = self._occupied_cells()
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if (x, y) not in occupied
        ]

    def _random_free_cell(self) -> Tuple[int, int]:
        """
        Return a random cell (x, y) not occupied by the snake.
        Rejection sampling: draw until a free cell comes up.
        """
        occupied = self._occupied_cells()
        while True:
            x = self.rng.randint(0, self.width - 1)
            y = self.rng.randint(0, self.height - 1)
            if (x, y) not in occupied:
                return (x, y)

    def _place_food(self) -> None:
        occupied = self._occupied_cells()
        if len(occupied) >= self.width * self.height:
            self.food = None
            self._end_game(DEATH_BOARD_FULL)
            return
        self.food = self._random_free_cell()

    def _occupied_cells(self) -> Set[Tuple[int, int]]:
        return set(self.snake.positions)

    def _in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def _end_game(self, reason: str) -> None:
        self.running = False
        self.death_reason = reason
        if reason == DEATH_BOARD_FULL:
            logger.info("Board full after %s ticks. Final score: %s", self.tick_number, self.score)
        else:
            logger.info(
                "Game over (%s) after %s ticks. Final score: %s",
                reason, self.tick_number, self.score,
            )

    def __repr__(self):
        return (
            f"<GameLoop {self.width}x{self.height} tick={self.tick_number} "
            f"score={self.score} running={self.running}>"
        )


# -------------------------------
# Game runner
# -------------------------------

def run_game(
    width: int,
    height: int,
    tick_seconds: float,
    player: Optional[Player] = None,
    max_ticks: Optional[int] = None,
    restarts: int = 0,
    seed: Optional[int] = None,
    show_board: bool = True,
    recorder: Optional[Callable[[GameState], None]] = None,
) -> List[GameState]:
    """
    Play one or more games on a fresh GameLoop.

    Args:
        width, height: board dimensions
        tick_seconds: delay between ticks
        player: autopilot supplying a direction before each tick
        max_ticks: stop after this many ticks in total (None = until game over)
        restarts: how many times to restart after a game over
        seed: seed for food placement (and nothing else)
        show_board: print the text board after every tick
        recorder: extra per-tick callback, e.g. a FrameRecorder

    Returns:
        The final GameState of each game played.
    """
    game = GameLoop(width, height, rng=random.Random(seed))

    def on_tick(state: GameState) -> None:
        if show_board:
            print("\n" + state.print_board() + "\n")
        if recorder is not None:
            recorder(state)

    scheduler = TickScheduler(
        game,
        interval=tick_seconds,
        player=player,
        on_tick=on_tick if show_board or recorder is not None else None,
        max_ticks=max_ticks,
        restarts=restarts,
    )
    try:
        return scheduler.run()
    except KeyboardInterrupt:
        scheduler.stop()
        logger.info("Interrupted; stopping after %s ticks.", game.tick_number)
        state = game.get_current_state()
        if state.running and state.tick_number > 0:
            return scheduler.results + [state]
        return scheduler.results


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Run the snake game with an autopilot player.")
    parser.add_argument("--width", type=int, default=settings.grid_width,
                        help=f"Width of the board (default: {settings.grid_width}).")
    parser.add_argument("--height", type=int, default=settings.grid_height,
                        help=f"Height of the board (default: {settings.grid_height}).")
    parser.add_argument("--tick-ms", type=int, default=settings.tick_ms,
                        help=f"Milliseconds between ticks (default: {settings.tick_ms}).")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks (default: play until game over).")
    parser.add_argument("--player", type=str, default=settings.player, choices=AVAILABLE_VARIANTS,
                        help=f"Autopilot variant (default: {settings.player}).")
    parser.add_argument("--restarts", type=int, default=0,
                        help="Restart this many times after a game over (default: 0).")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and the autopilot.")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board every tick.")
    parser.add_argument("--frames", type=int, default=0,
                        help=f"Render each tick to an image at {settings.cell_size}px per cell and "
                             "keep the last N frames in memory (default: 0, off).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    player_cls = get_player_class(args.player)
    player = player_cls(rng=random.Random(args.seed))

    recorder = None
    if args.frames > 0:
        recorder = FrameRecorder(FrameRenderer(cell_size=settings.cell_size), max_frames=args.frames)

    results = run_game(
        width=args.width,
        height=args.height,
        tick_seconds=args.tick_ms / 1000.0,
        player=player,
        max_ticks=args.max_ticks,
        restarts=args.restarts,
        seed=args.seed,
        show_board=not args.quiet,
        recorder=recorder,
    )

    for number, state in enumerate(results, start=1):
        print(
            f"Game {number}: score={state.score} length={state.length} "
            f"ticks={state.tick_number} ended={state.death_reason or 'still running'}"
        )
    if recorder is not None and recorder.last_frame is not None:
        width, height = recorder.last_frame.size
        print(f"Rendered {recorder.rendered} frames of {width}x{height}px; kept {len(recorder.frames)}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
