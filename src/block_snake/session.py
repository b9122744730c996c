"""Movement and clock timers driving one game on the asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

import numpy as np

from block_snake.clock import TimeTracker
from block_snake.engine import Collided, GameEngine, GameStatus
from block_snake.snake import Direction

logger = logging.getLogger(__name__)

FrameListener = Callable[[dict], Awaitable[None]]


class GameSession:
    """Runs a :class:`GameEngine` in real time.

    Two periodic tasks share the event loop: the movement timer ticks the
    engine and the clock timer advances the elapsed time. They are always
    launched together and cancelled together. After every timer event the
    session builds a frame and hands it to *on_frame*.
    """

    def __init__(
        self,
        engine: GameEngine,
        on_frame: FrameListener | None = None,
        clock: TimeTracker | None = None,
    ) -> None:
        self.engine = engine
        self.clock = clock if clock is not None else TimeTracker()
        self.on_frame = on_frame
        self.move_interval = engine.config.move_interval_ms / 1000.0
        self.clock_interval = engine.config.clock_interval_ms / 1000.0
        self.lock = asyncio.Lock()
        self._move_task: asyncio.Task | None = None
        self._clock_task: asyncio.Task | None = None
        self._board = self._render()

    @property
    def running(self) -> bool:
        """True while either timer is still scheduled."""
        return any(
            t is not None and not t.done()
            for t in (self._move_task, self._clock_task)
        )

    async def start(self) -> None:
        async with self.lock:
            self.engine.start()
            self.clock.reset()
            self._launch_timers()
        await self._publish()

    async def restart(self) -> None:
        async with self.lock:
            self._cancel_timers()
            self.engine.restart()
            self.clock.reset()
            self._launch_timers()
        await self._publish()

    async def set_direction(self, direction: Direction) -> None:
        async with self.lock:
            self.engine.set_direction(direction)

    async def stop(self) -> None:
        """Cancel both timers and wait for them to finish."""
        tasks = [
            t for t in (self._move_task, self._clock_task)
            if t is not None and t is not asyncio.current_task()
        ]
        self._cancel_timers()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def frame(self) -> dict:
        """Return the engine state plus display data.

        ``changed`` lists the packed cells that differ from the previous
        frame, so a display can redraw only those.
        """
        board = self._render()
        data = self.engine.get_state()
        data["time"] = self.clock.text
        data["cells"] = board.tolist()
        data["changed"] = self.engine.grid.changed_cells(self._board, board)
        self._board = board
        return data

    def _render(self) -> np.ndarray:
        state = self.engine.state
        return self.engine.grid.render(state.snake, state.food)

    def _launch_timers(self) -> None:
        self._move_task = asyncio.create_task(
            self._periodic(self.move_interval, self._on_move),
        )
        self._clock_task = asyncio.create_task(
            self._periodic(self.clock_interval, self._on_clock),
        )

    def _cancel_timers(self) -> None:
        current = asyncio.current_task()
        for task in (self._move_task, self._clock_task):
            if task is not None and task is not current and not task.done():
                task.cancel()
        self._move_task = None
        self._clock_task = None

    async def _periodic(
        self, interval: float, callback: Callable[[], Awaitable[bool]],
    ) -> None:
        """Call *callback* every *interval* seconds until it returns False."""
        try:
            while True:
                await asyncio.sleep(interval)
                if not await callback():
                    return
        except asyncio.CancelledError:
            logger.info("Timer cancelled.")
            raise
        except Exception:
            logger.exception("Timer callback failed; stopping session.")
            self._cancel_timers()

    async def _on_move(self) -> bool:
        async with self.lock:
            if self.engine.status is not GameStatus.RUNNING:
                return False
            result = self.engine.tick()
            if isinstance(result, Collided):
                self._cancel_timers()
        await self._publish()
        return not isinstance(result, Collided)

    async def _on_clock(self) -> bool:
        async with self.lock:
            if self.engine.status is not GameStatus.RUNNING:
                return False
            self.clock.advance()
        await self._publish()
        return True

    async def _publish(self) -> None:
        if self.on_frame is not None:
            await self.on_frame(self.frame())
