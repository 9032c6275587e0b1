"""Clock - tick counter for the simulation engine."""

from tick_predprey.types import TickContext


class Clock:
    def __init__(self) -> None:
        self._tick_number = 0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self) -> TickContext:
        return TickContext(tick_number=self._tick_number)
