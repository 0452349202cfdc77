import asyncio
import functools
import logging
from collections.abc import Callable
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from typing import Any

from packline.core.models.options import Options
from packline.core.models.record import Record
from packline.core.pipeline import Pipeline

Callback = Callable[[BaseException | None, Any], None]
"""
Completion callback, called once as callback(error, None) on failure or
callback(None, result) on success.
"""


class PipelineWorker:
    """
    Runs pipeline calls on a dedicated thread pool so that a caller's event
    loop (or any other latency sensitive thread) is not blocked while large
    payloads are being compressed.

    The pipeline itself is unaware of this: it is shared as-is between the
    worker threads since it holds no mutable state.
    """

    def __init__(self, pipeline: Pipeline, max_workers: int = 4) -> None:
        self._pipeline = pipeline
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="packline"
        )
        self._logger = logging.getLogger("packline.bridge.worker")

    async def encode(self, record: Record, options: Options | None = None) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._pool, self._pipeline.run_encode, record, options
        )

    async def decode(self, text: str, options: Options | None = None) -> Record:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._pool, self._pipeline.run_decode, text, options
        )

    def submit(self, func: Callable[..., Any], *args: Any, callback: Callback) -> Future:
        """
        Schedule `func(*args)` on the pool and deliver its outcome to
        `callback` exactly once, from the worker thread.
        """
        if not callable(callback):
            raise TypeError(f"callback must be callable, got {type(callback).__name__}")

        future = self._pool.submit(func, *args)
        future.add_done_callback(functools.partial(self._deliver, callback))
        return future

    def close(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)

    def _deliver(self, callback: Callback, future: Future) -> None:
        if future.cancelled():
            error, result = CancelledError(), None
        elif (ex := future.exception()) is not None:
            error, result = ex, None
        else:
            error, result = None, future.result()

        try:
            callback(error, result)
        except Exception as ex:
            self._logger.error(
                f"Error occurred in completion callback {callback!r}: {str(ex)}",
                exc_info=ex
            )
