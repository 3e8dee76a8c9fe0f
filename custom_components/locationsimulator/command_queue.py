"""
CommandQueue — serialises every state-changing coordinator operation.

This is a pure asyncio concurrency primitive with no HA dependencies.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

_LOGGER = logging.getLogger(__name__)


class CommandQueue:
    """
    Runs submitted jobs one at a time, in submission order.

    A job is a coroutine factory. It is not started until every job submitted
    before it has finished, so a multi-step operation that awaits a
    collaborator cannot interleave with another job. The result (or
    exception) of each job is delivered through the Future returned by
    submit().
    """

    def __init__(self) -> None:
        # (name, coro_factory, Future) triples
        self._queue: asyncio.Queue | None = None
        self._worker: asyncio.Task | None = None
        # name of the job currently being executed
        self._running: str | None = None
        self._closed = False

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def submit(self, name: str, coro_factory: Callable[[], Awaitable[Any]]) -> asyncio.Future:
        """
        Schedule coro_factory() after every previously submitted job.

        Must be called from the event loop. Raises RuntimeError once the
        queue has been shut down.
        """
        if self._closed:
            raise RuntimeError(f"Command queue is shut down, cannot run {name}")
        self._ensure_worker()

        fut: asyncio.Future = asyncio.get_event_loop().create_future()
        self._queue.put_nowait((name, coro_factory, fut))
        return fut

    async def join(self) -> None:
        """Wait until every submitted job has finished."""
        if self._queue is not None:
            await self._queue.join()

    async def shutdown(self) -> None:
        """Cancel the worker and fail every job that never ran."""
        self._closed = True
        if self._worker is not None:
            if self._running is not None:
                _LOGGER.debug("Cancelling command %s during shutdown", self._running)
            self._worker.cancel()
            results = await asyncio.gather(self._worker, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception) and not isinstance(result, asyncio.CancelledError):
                    _LOGGER.debug("CommandQueue worker error during shutdown: %s", result)
        if self._queue is not None:
            while not self._queue.empty():
                name, _coro_factory, fut = self._queue.get_nowait()
                if not fut.done():
                    fut.cancel()
                _LOGGER.debug("Dropped queued command %s during shutdown", name)
        self._worker = None
        self._queue = None
        self._running = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _ensure_worker(self) -> None:
        """Create the queue and worker on first use."""
        if self._queue is None:
            self._queue = asyncio.Queue()
        if self._worker is None or self._worker.done():
            self._worker = asyncio.ensure_future(self._work())

    async def _work(self) -> None:
        """Consume jobs indefinitely."""
        queue = self._queue
        while True:
            name, coro_factory, fut = await queue.get()
            self._running = name
            try:
                result = await coro_factory()
                if not fut.done():
                    fut.set_result(result)
            except asyncio.CancelledError:
                if not fut.done():
                    fut.cancel()
                if asyncio.current_task().cancelling():
                    raise
                # The job cancelled itself; the worker keeps going
                _LOGGER.debug("Command %s was cancelled", name)
            except Exception as exc:  # noqa: BLE001
                if not fut.done():
                    fut.set_exception(exc)
            finally:
                self._running = None
                queue.task_done()
