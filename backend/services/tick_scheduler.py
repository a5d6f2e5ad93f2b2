"""
Fixed-interval scheduler that drives a GameLoop.

One tick runs at a time on the calling thread: ask the autopilot (if any)
for a direction, tick, hand the snapshot to the render callback, then wait
out the rest of the interval. stop() may be called from any thread.
"""

import logging
import threading
import time
from typing import Callable, List, Optional

from domain.game_state import GameState

logger = logging.getLogger(__name__)


class TickScheduler:
    """Runs `game.tick()` every `interval` seconds until the game ends or stop()."""

    def __init__(
        self,
        game,
        interval: float,
        player=None,
        on_tick: Optional[Callable[[GameState], None]] = None,
        max_ticks: Optional[int] = None,
        restarts: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if interval < 0:
            raise ValueError(f"Tick interval must not be negative, got {interval}")
        if max_ticks is not None and max_ticks < 0:
            raise ValueError(f"max_ticks must not be negative, got {max_ticks}")
        if restarts < 0:
            raise ValueError(f"restarts must not be negative, got {restarts}")

        self.game = game
        self.interval = interval
        self.player = player
        self.on_tick = on_tick
        self.max_ticks = max_ticks
        self.restarts = restarts
        self.clock = clock

        self.ticks_run = 0
        self.results: List[GameState] = []
        self._stop_event = threading.Event()

    def stop(self) -> None:
        """Ask run() to return after the tick in progress."""
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def run(self) -> List[GameState]:
        """
        Loop until the last game ends, max_ticks is reached or stop() is called.

        Returns:
            The final GameState of every game played, in order. A game cut
            short by max_ticks or stop() is included with running=True; a
            game with no ticks played is not included.
        """
        restarts_left = self.restarts
        game_ticks = 0
        logger.info(
            "Starting tick loop: interval=%.3fs max_ticks=%s restarts=%s",
            self.interval, self.max_ticks, self.restarts,
        )

        while not self._stop_event.is_set():
            if self._max_ticks_reached():
                logger.info("Reached max ticks (%s).", self.max_ticks)
                break

            started = self.clock()
            state = self._run_one_tick()
            game_ticks += 1

            if not state.running:
                self.results.append(state)
                game_ticks = 0
                logger.info(
                    "Game %s finished: score=%s length=%s reason=%s",
                    len(self.results), state.score, state.length, state.death_reason,
                )
                if restarts_left <= 0 or self._stop_event.is_set() or self._max_ticks_reached():
                    break
                restarts_left -= 1
                self.game.restart()
                logger.info("Restarting (%s restarts left).", restarts_left)

            elapsed = self.clock() - started
            remaining = self.interval - elapsed
            if remaining > 0:
                # Event.wait returns early when stop() is called
                self._stop_event.wait(remaining)

        if game_ticks > 0:
            self.results.append(self.game.get_current_state())
        logger.info("Tick loop finished after %s ticks.", self.ticks_run)
        return self.results

    def _max_ticks_reached(self) -> bool:
        return self.max_ticks is not None and self.ticks_run >= self.max_ticks

    def _run_one_tick(self) -> GameState:
        if self.player is not None:
            move = self.player.get_move(self.game.get_current_state())
            if move is not None:
                self.game.request_direction(move)

        self.game.tick()
        self.ticks_run += 1

        state = self.game.get_current_state()
        if self.on_tick is not None:
            self.on_tick(state)
        return state
