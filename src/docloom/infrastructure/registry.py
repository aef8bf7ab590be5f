"""Reference registry: collects crefs discovered while building comments."""

from __future__ import annotations

import threading
from collections import Counter


class ReferenceRegistry:
    """Thread-safe counter of discovered reference identifiers.

    Instances are callable so they can be passed directly as
    ``SourceContext.on_reference_discovered``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: Counter[str] = Counter()

    def __call__(self, identifier: str) -> None:
        self.add(identifier)

    def add(self, identifier: str) -> None:
        with self._lock:
            self._counts[identifier] += 1

    def count(self, identifier: str) -> int:
        with self._lock:
            return self._counts[identifier]

    @property
    def identifiers(self) -> list[str]:
        """Distinct identifiers, sorted."""
        with self._lock:
            return sorted(self._counts)

    def items(self) -> list[tuple[str, int]]:
        with self._lock:
            return sorted(self._counts.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._counts
