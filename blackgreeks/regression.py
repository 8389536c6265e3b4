"""Per-expiry forward and discount-factor regression results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(slots=True)
class LinearRegressionStats:
    """Fit statistics of one linear regression and the curve values derived from it."""

    intercept: float = 0.0
    slope: float = 0.0
    r_squared: float = 0.0
    rmse: float = 0.0
    count: int = 0
    maturity: float = 0.0
    discount_factor: float = 0.0
    forward: float = 0.0
    zero_rate: float = 0.0


class ForwardRegressions:
    """Regression results keyed by expiry time, in insertion order.

    When an expiry is added twice, lookups return the first result.
    """

    def __init__(self, items: Iterable[tuple[int, LinearRegressionStats]] = ()) -> None:
        self._entries: list[tuple[int, LinearRegressionStats]] = []
        self._first: dict[int, LinearRegressionStats] = {}
        for expiry, stats in items:
            self.add(expiry, stats)

    def add(self, expiry: int, stats: LinearRegressionStats) -> None:
        """Append the result for one expiry."""
        self._entries.append((expiry, stats))
        self._first.setdefault(expiry, stats)

    def find(self, expiry: int) -> LinearRegressionStats | None:
        """Return the result for ``expiry``, or None when there is none."""
        return self._first.get(expiry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, LinearRegressionStats]]:
        return iter(self._entries)