from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[Any]]


class Debouncer:
    """
    Run ``action`` once input has been quiet for ``delay`` seconds.

    Each :meth:`trigger` cancels the pending timer and starts a new one, so
    only the last trigger inside the window fires. Once a timer has fired
    the action keeps running even if a newer trigger arrives; :meth:`cancel`
    only drops timers that have not fired yet. :meth:`aclose` cancels both
    the pending timer and any action still in flight.
    """

    def __init__(self, action: Callable[..., Any], delay: float = 0.5, *, sleep: SleepFn = asyncio.sleep):
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._action = action
        self.delay = delay
        self._sleep = sleep
        self._timer: asyncio.Task | None = None
        # Strong refs to every scheduled task until it completes
        self._tasks: set[asyncio.Task] = set()
        self._fired: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        return self._timer is not None and not self._timer.done()

    @property
    def in_flight(self) -> int:
        return len(self._fired)

    def trigger(self, *args: Any) -> None:
        self.cancel()
        task = asyncio.get_running_loop().create_task(self._run(args))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(self._fired.discard)
        self._timer = task

    def cancel(self) -> None:
        if self.pending:
            self._timer.cancel()
        self._timer = None

    async def aclose(self) -> None:
        self._timer = None
        tasks = [t for t in self._tasks if not t.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def __aenter__(self) -> "Debouncer":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _run(self, args: tuple[Any, ...]) -> None:
        await self._sleep(self.delay)
        # Fired: from here on we are no longer a pending timer.
        task = asyncio.current_task()
        self._fired.add(task)
        if self._timer is task:
            self._timer = None
        try:
            result = self._action(*args)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Debounced action failed")


__all__ = ["Debouncer"]
