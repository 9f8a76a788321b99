"""Run a callback repeatedly on a fixed interval in background threads."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import timedelta


class Ticker:
    """Calls ``on_tick`` once per ``interval`` until stopped.

    Each call runs in its own thread, so a slow callback does not delay the
    next tick. ``interval`` is a number of seconds or a ``timedelta``.
    """

    def __init__(self, on_tick: Callable[[], object], interval: float | timedelta) -> None:
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        self._on_tick = on_tick
        self._interval = float(interval)
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._stop_event.set()
        self._loop_thread: threading.Thread | None = None
        self._tick_threads: list[threading.Thread] = []

    @property
    def interval(self) -> float:
        """The time between ticks, in seconds."""
        return self._interval

    @property
    def running(self) -> bool:
        """True while the ticker is started and not stopped."""
        return not self._stop_event.is_set()

    def start(self) -> None:
        """Start ticking; does nothing if already running."""
        with self._lock:
            if self.running:
                return
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._loop_thread = threading.Thread(
                target=self._run, args=(stop_event,), daemon=True
            )
            self._loop_thread.start()

    def stop(self) -> None:
        """Stop ticking and wait for the loop and every running callback to finish."""
        with self._lock:
            self._stop_event.set()
            loop_thread, self._loop_thread = self._loop_thread, None
        current = threading.current_thread()
        if loop_thread is not None and loop_thread is not current:
            loop_thread.join()
        with self._lock:
            tick_threads, self._tick_threads = self._tick_threads, []
        for thread in tick_threads:
            if thread is not current:
                thread.join()

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            thread = threading.Thread(target=self._on_tick, daemon=True)
            with self._lock:
                self._tick_threads = [t for t in self._tick_threads if t.is_alive()]
                self._tick_threads.append(thread)
            thread.start()
            stop_event.wait(self._interval)

    def __enter__(self) -> Ticker:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()