# catalog/core/tasks.py
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial
from typing import Callable, Optional

from catalog.core.config import settings
from catalog.core.exceptions import BackgroundTaskFailure

logger = logging.getLogger("uvicorn")


class BackgroundDispatcher:
    """
    Runs fire-and-forget work next to the request/response cycle.

    Callers get no handle back. A task finishes in no particular order relative
    to later reads, and its failures are only reported through the log.
    """

    def __init__(self, max_workers: Optional[int] = None, thread_name_prefix: str = "field-values"):
        self.max_workers = max_workers or settings.FIELD_VALUES_MAX_WORKERS
        self.thread_name_prefix = thread_name_prefix
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix=self.thread_name_prefix,
                )
            return self._executor

    def submit(self, fn: Callable, *args, description: Optional[str] = None, **kwargs) -> None:
        description = description or getattr(fn, "__name__", repr(fn))
        future = self._get_executor().submit(fn, *args, **kwargs)
        future.add_done_callback(partial(self._report, description))
        logger.debug(f"Dispatched background task: {description}")

    @staticmethod
    def _report(description: str, future: Future) -> None:
        if future.cancelled():
            logger.warning(f"⚠️ Background task cancelled: {description}")
            return
        exc = future.exception()
        if exc is None:
            return
        failure = BackgroundTaskFailure(description, exc)
        logger.error(f"❌ {failure}", exc_info=(type(exc), exc, exc.__traceback__))

    def shutdown(self, wait: bool = True) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)


background_dispatcher = BackgroundDispatcher()
