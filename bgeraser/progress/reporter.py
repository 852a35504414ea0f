"""Optimistic upload progress for the presentation layer.

The pipeline answers with one response and has no progress channel, so this
is a UX affordance only: it never reflects real transfer state. The caller's
timer drives tick(); the real response drives complete() or fail().
"""


class ProgressReporter:
    """Simulated progress: climbs to a ceiling, then waits for the response."""

    def __init__(self, step: int = 10, ceiling: int = 90) -> None:
        if step <= 0:
            raise ValueError("step must be positive")
        if not 0 < ceiling < 100:
            raise ValueError("ceiling must be between 0 and 100 exclusive")
        self._step = step
        self._ceiling = ceiling
        self._value: int | None = None

    @property
    def value(self) -> int | None:
        """Current percentage, or None when idle or after an error."""
        return self._value

    @property
    def in_flight(self) -> bool:
        return self._value is not None and self._value < 100

    def start(self) -> int:
        self._value = 0
        return self._value

    def tick(self) -> int | None:
        """Advance one increment; frozen at the ceiling until the response."""
        if self._value is None or self._value >= self._ceiling:
            return self._value
        self._value = min(self._value + self._step, self._ceiling)
        return self._value

    def complete(self) -> int:
        self._value = 100
        return self._value

    def fail(self) -> None:
        self._value = None

    def reset(self) -> None:
        self._value = None
