"""ViolationSet: the shared accumulator constraints write into during a run."""

import heapq
import itertools
import threading
from typing import Iterator, Optional

from mapguard.validators.models import Violation


class ViolationSet:
    """De-duplicating collection of violations, kept worst first.

    Equal violations (same level, prefix and message) are stored once. Iteration
    yields entries by ascending level rank; entries of the same rank come out in
    the order they were first added.

    All mutation goes through a single lock, so constraints may write into one
    set from several threads.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._members: set[Violation] = set()
        self._heap: list[tuple[int, int, Violation]] = []
        self._sequence = itertools.count()

    def add(self, violation: Violation) -> bool:
        """Add a violation. Returns False if an equal one was already present."""
        with self._lock:
            if violation in self._members:
                return False
            self._members.add(violation)
            heapq.heappush(self._heap, (violation.level.rank, next(self._sequence), violation))
            return True

    def worst(self) -> Optional[Violation]:
        """The most severe violation held, or None when empty."""
        with self._lock:
            return self._heap[0][2] if self._heap else None

    def snapshot(self) -> tuple[Violation, ...]:
        """Point-in-time copy, worst first."""
        with self._lock:
            return tuple(entry[2] for entry in sorted(self._heap))

    def __iter__(self) -> Iterator[Violation]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._members)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __contains__(self, violation: object) -> bool:
        with self._lock:
            return violation in self._members

    def __repr__(self) -> str:
        return f"ViolationSet({len(self)} violations)"
