"""Animal - the single entity type shared by prey and predators."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from tick_predprey.types import RULES, EntityId, Facing, Kind, KindRules

# (row delta, col delta) per facing.
_STEPS: dict[Facing, tuple[int, int]] = {
    Facing.NORTH: (-1, 0),
    Facing.EAST: (0, 1),
    Facing.SOUTH: (1, 0),
    Facing.WEST: (0, -1),
}


@dataclass(frozen=True, slots=True)
class Animal:
    """A prey or predator, tagged by ``kind``.

    Instances are immutable; every phase of a tick produces new ones through
    the ``*ed`` helpers below. ``food`` only ever changes for predators.
    """

    kind: Kind
    eid: EntityId
    row: int
    col: int
    facing: Facing
    stability: int = 0
    age: int = 0
    food: int = 0

    @property
    def rules(self) -> KindRules:
        return RULES[self.kind]

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    @property
    def is_dead(self) -> bool:
        return self.age >= self.rules.max_age

    def moved(self, rows: int, cols: int) -> Animal:
        dr, dc = _STEPS[self.facing]
        row, col = self.row, self.col
        for _ in range(self.rules.step_distance):
            row = (row + dr + rows) % rows
            col = (col + dc + cols) % cols
        return dataclasses.replace(self, row=row, col=col)

    def aged(self) -> Animal:
        return dataclasses.replace(self, age=self.age + 1)

    def fed(self, amount: int) -> Animal:
        return dataclasses.replace(self, food=self.food + amount)

    def rotated(self) -> Animal:
        """Turn clockwise if the current age closes a stability period."""
        if self.stability > 0 and self.age > 0 and self.age % self.stability == 0:
            return dataclasses.replace(self, facing=self.facing.turned())
        return self

    def wants_offspring(self) -> bool:
        rules = self.rules
        if self.age in rules.breeding_ages:
            return True
        return rules.breeding_food > 0 and self.food >= rules.breeding_food

    def offspring(self, eid: EntityId) -> Animal:
        return Animal(
            kind=self.kind,
            eid=eid,
            row=self.row,
            col=self.col,
            facing=self.facing,
            stability=self.stability,
        )
