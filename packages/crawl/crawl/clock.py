"""TimeCursor - per-frame counter, optionally wrapped to a period."""
from __future__ import annotations

from crawl.types import ConfigurationError


class TimeCursor:
    def __init__(self, period: int | None = None) -> None:
        if period is not None and period <= 0:
            raise ConfigurationError(f"period must be positive, got {period}")
        self._period = period
        self._value = 0

    @property
    def period(self) -> int | None:
        return self._period

    @property
    def value(self) -> int:
        return self._value

    def advance(self) -> int:
        self._value += 1
        if self._period is not None:
            self._value %= self._period
        return self._value

    def reset(self, value: int = 0) -> None:
        self._value = value
