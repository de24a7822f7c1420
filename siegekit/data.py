"""Running totals for a load test and the statistics derived from them."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

__all__ = ["Data"]

_MEGABYTE = 1024.0 * 1024.0


@dataclass
class Data:
    """Counters gathered while a run is in progress.

    ``count`` is the number of transactions, ``code`` the number of
    successful responses, ``okay`` the number of 200 responses, ``fail``
    the number of failures and ``total`` the summed transaction time in
    seconds.
    """

    total: float = 0.0
    count: int = 0
    code: int = 0
    fail: int = 0
    okay: int = 0
    bytes: int = 0
    highest: float = 0.0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)
    _lowest: float = field(default=-1.0, init=False, repr=False)
    _elapsed: float = field(default=0.0, init=False, repr=False)
    _started: float = field(default=0.0, init=False, repr=False)
    _stopped: float = field(default=0.0, init=False, repr=False)

    def start(self) -> None:
        """Mark the beginning of the run."""
        self._started = self.clock()

    def stop(self) -> None:
        """Mark the end of the run."""
        self._stopped = self.clock()

    def add_bytes(self, count: int) -> None:
        self.bytes += count

    def add_count(self, count: int) -> None:
        self.count += count

    def add_total(self, total: float) -> None:
        self.total += total

    def add_code(self, code: int) -> None:
        self.code += code

    def add_fail(self, fail: int) -> None:
        self.fail += fail

    def add_okay(self, okay: int) -> None:
        self.okay += okay

    def record_highest(self, value: float) -> None:
        """Keep ``value`` if it is the longest transaction seen so far."""
        if self.highest < value:
            self.highest = value

    def record_lowest(self, value: float) -> None:
        """Keep ``value`` if it is the shortest transaction seen so far."""
        if self._lowest <= 0 or self._lowest > value:
            self._lowest = value

    def lowest(self) -> float:
        """The shortest transaction, or 0 when nothing succeeded."""
        if self.code:
            return self._lowest
        return float(self.code)

    def megabytes(self) -> float:
        return self.bytes / _MEGABYTE

    def elapsed(self) -> float:
        """Seconds between start and stop; later rates are based on this value."""
        self._elapsed = self._stopped - self._started
        return self._elapsed

    def availability(self) -> float:
        """Percentage of transactions that did not fail, in whole steps."""
        if self.count == 0:
            self._available = 0.0
        else:
            self._available = float(self.count // (self.count + self.fail) * 100)
        return self._available

    def response_time(self) -> float:
        """Average transaction time in seconds."""
        if self.total == 0 or self.count == 0:
            return 0.0
        return self.total / self.count

    def transaction_rate(self) -> float:
        """Transactions per second over the last computed elapsed time."""
        if self.count == 0 or self._elapsed == 0:
            return 0.0
        return self.count / self._elapsed

    def throughput(self) -> float:
        """Megabytes per second over the last computed elapsed time."""
        if self._elapsed == 0:
            return 0.0
        return self.bytes / (self._elapsed * _MEGABYTE)

    def concurrency(self) -> float:
        """Summed transaction time divided by elapsed time."""
        if self._elapsed == 0:
            return 0.0
        return self.total / self._elapsed