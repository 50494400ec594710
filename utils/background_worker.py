from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from loguru import logger

__all__ = ["BackgroundWorker"]

Dispatcher = Callable[..., None]


def _wx_dispatch(callback: Callable[..., None], *args: Any) -> None:
    try:
        import wx
    except ImportError:
        callback(*args)
        return
    wx.CallAfter(callback, *args)


class BackgroundWorker:
    """Runs blocking backend calls off the UI thread.

    Each submitted call gets its own daemon thread. Results and errors are
    handed to the callbacks through ``dispatcher``, which defaults to
    ``wx.CallAfter`` so callbacks run on the wx main loop.
    """

    def __init__(self, dispatcher: Dispatcher | None = None) -> None:
        self._dispatch = dispatcher or _wx_dispatch
        self._stopped = threading.Event()
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()

    @property
    def active_count(self) -> int:
        with self._lock:
            return sum(1 for thread in self._threads if thread.is_alive())

    def submit(
        self,
        func: Callable[..., Any],
        *args: Any,
        on_success: Callable[[Any], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
        **kwargs: Any,
    ) -> None:
        """Call ``func(*args, **kwargs)`` in a background thread.

        ``on_success`` receives the return value, ``on_error`` the raised
        exception. Nothing is started once the worker has been shut down, and
        results or errors arriving after shutdown are dropped.
        """
        name = getattr(func, "__name__", "task")
        if self.is_stopped():
            logger.debug(f"Ignoring task {name}; worker is shut down")
            return

        thread = threading.Thread(
            target=self._run_task,
            args=(func, args, kwargs, on_success, on_error),
            name=f"worker-{name}",
            daemon=True,
        )
        with self._lock:
            self._threads = [t for t in self._threads if t.is_alive()]
            self._threads.append(thread)
        thread.start()

    def _run_task(
        self,
        func: Callable[..., Any],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        on_success: Callable[[Any], None] | None,
        on_error: Callable[[Exception], None] | None,
    ) -> None:
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            logger.debug(f"{threading.current_thread().name} raised {exc!r}")
            if on_error is not None and not self.is_stopped():
                self._dispatch(on_error, exc)
            return

        if on_success is not None and not self.is_stopped():
            self._dispatch(on_success, result)

    def is_stopped(self) -> bool:
        return self._stopped.is_set()

    def shutdown(self, timeout: float = 5.0) -> None:
        """Stop accepting work and join running threads, each for at most ``timeout`` seconds."""
        self._stopped.set()
        with self._lock:
            pending = [thread for thread in self._threads if thread.is_alive()]

        for thread in pending:
            thread.join(timeout=timeout)
            if thread.is_alive():
                logger.warning(f"Thread {thread.name} did not finish within {timeout}s")
        logger.debug(f"Background worker stopped ({len(pending)} thread(s) joined)")

    def __enter__(self) -> BackgroundWorker:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()
