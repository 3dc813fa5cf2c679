from __future__ import annotations

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass(order=True)
class Timer:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class CooperativeScheduler:
    """
    Single-thread timer queue.

    Nothing runs on its own: the owner calls `run_due()` from its event
    loop, so callbacks execute on the loop's thread between input events.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self._heap: List[Timer] = []
        self._seq = itertools.count()

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Timer:
        t = Timer(due=self.clock() + delay_ms / 1000.0, seq=next(self._seq), callback=callback)
        heapq.heappush(self._heap, t)
        return t

    def cancel(self, timer: Timer) -> None:
        timer.cancelled = True

    def pending(self) -> int:
        return sum(1 for t in self._heap if not t.cancelled)

    def _drop_cancelled(self) -> None:
        while self._heap and self._heap[0].cancelled:
            heapq.heappop(self._heap)

    def next_timeout(self) -> Optional[float]:
        """Seconds until the next live timer, None if there is none."""
        self._drop_cancelled()
        if not self._heap:
            return None
        return max(0.0, self._heap[0].due - self.clock())

    def run_due(self) -> int:
        """Run every timer due by now (including ones scheduled while running). Returns how many ran."""
        ran = 0
        while True:
            self._drop_cancelled()
            if not self._heap or self._heap[0].due > self.clock():
                return ran
            t = heapq.heappop(self._heap)
            t.callback()
            ran += 1
            if ran > 10_000:
                # a zero-delay callback rescheduling itself would never yield
                return ran
