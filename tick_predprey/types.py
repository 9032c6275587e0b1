"""Shared types, per-kind rules, and errors for the predator-prey engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


class Facing(enum.IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turned(self) -> Facing:
        """Next facing clockwise (NORTH -> EAST -> SOUTH -> WEST -> NORTH)."""
        return Facing((self + 1) % 4)


class Kind(enum.Enum):
    PREY = "prey"
    PREDATOR = "predator"


@dataclass(frozen=True, slots=True)
class KindRules:
    """Immutable per-kind constants.

    Attributes:
        step_distance: Single-cell moves taken along the facing each tick.
        max_age: Age at which the animal is removed.
        breeding_ages: Ages at which the animal spawns one offspring.
        breeding_food: Food needed to spawn one offspring; 0 disables.
    """

    step_distance: int
    max_age: int
    breeding_ages: frozenset[int] = frozenset()
    breeding_food: int = 0


RULES: dict[Kind, KindRules] = {
    Kind.PREY: KindRules(step_distance=1, max_age=10, breeding_ages=frozenset({5, 10})),
    Kind.PREDATOR: KindRules(step_distance=2, max_age=15, breeding_food=2),
}


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int


class WorldConfigError(ValueError):
    """Raised when a world or one of its initial animals is malformed."""


class InvalidExtent(WorldConfigError):
    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(f"Grid extent must be positive, got {rows}x{cols}")


class InvalidPosition(WorldConfigError):
    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        self.row = row
        self.col = col
        super().__init__(
            f"({row}, {col}) out of bounds for {rows}x{cols} grid"
        )


class InvalidFacing(WorldConfigError):
    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Facing code must be 0-3, got {code!r}")


class InvalidStability(WorldConfigError):
    def __init__(self, stability: int) -> None:
        self.stability = stability
        super().__init__(f"Stability must be non-negative, got {stability}")


class ScenarioError(ValueError):
    """Raised when scenario text cannot be parsed."""


if TYPE_CHECKING:
    from tick_predprey.world import World

System = Callable[["World", TickContext], "World"]
