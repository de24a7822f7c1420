"""A fixed-size pool of worker threads fed from a bounded queue."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from typing import Any

__all__ = ["Crew"]

_log = logging.getLogger(__name__)


class Crew:
    """Worker threads that run queued routines.

    At most ``maxsize`` routines wait in the queue. When the queue is full,
    :meth:`add` waits if ``block`` is true and refuses the work otherwise.
    """

    def __init__(self, size: int, maxsize: int, block: bool = True):
        if size < 0:
            raise ValueError("crew size must not be negative: %d" % size)
        self.size = size
        self.maxsize = maxsize
        self.block = block
        self.total = 0
        self.closed = False
        self.shutdown = False
        self._queue: deque[tuple[Callable[..., Any], tuple]] = deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)
        self._empty = threading.Condition(self._lock)
        self._threads: list[threading.Thread] = []
        for number in range(size):
            worker = threading.Thread(
                target=self._work, name="crew-%d" % number, daemon=True
            )
            try:
                worker.start()
            except RuntimeError as exc:
                self.cancel()
                raise RuntimeError("unable to build thread pool") from exc
            self._threads.append(worker)

    def _work(self) -> None:
        while True:
            with self._lock:
                while not self._queue and not self.shutdown:
                    self._not_empty.wait()
                if self.shutdown:
                    return
                routine, args = self._queue.popleft()
                if self.block and len(self._queue) == self.maxsize - 1:
                    self._not_full.notify_all()
                if not self._queue:
                    self._empty.notify()
            try:
                routine(*args)
            except Exception:
                _log.exception("crew routine failed")

    def add(self, routine: Callable[..., Any], *args: Any) -> bool:
        """Queue ``routine(*args)``; False if refused or the crew is closed."""
        with self._lock:
            if len(self._queue) >= self.maxsize and not self.block:
                return False
            while len(self._queue) >= self.maxsize and not (self.shutdown or self.closed):
                self._not_full.wait()
            if self.shutdown or self.closed:
                return False
            self._queue.append((routine, args))
            if len(self._queue) == 1:
                self._not_empty.notify_all()
            self.total += 1
        return True

    def cancel(self) -> bool:
        """Stop the crew; pending work is dropped and idle workers exit."""
        with self._lock:
            self.shutdown = True
            self._not_empty.notify_all()
            self._not_full.notify_all()
            self._empty.notify_all()
        return True

    def join(self, finish: bool = True) -> bool:
        """Close the crew and wait for its workers.

        With ``finish`` the queue is drained first. Returns False if the crew
        was already closed or shut down.
        """
        with self._lock:
            if self.closed or self.shutdown:
                return False
            self.closed = True
            if finish:
                while self._queue and not self.shutdown:
                    self._empty.wait()
            self.shutdown = True
            self._not_empty.notify_all()
            self._not_full.notify_all()
        for worker in self._threads:
            worker.join()
        return True

    def __enter__(self) -> "Crew":
        return self

    def __exit__(self, *args) -> None:
        self.join(True)