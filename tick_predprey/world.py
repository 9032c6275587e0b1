"""World - grid extent, both populations, and the identity counter."""

from __future__ import annotations

from typing import Iterator

from tick_predprey.components import Animal
from tick_predprey.types import (
    EntityId,
    Facing,
    InvalidExtent,
    InvalidFacing,
    InvalidPosition,
    InvalidStability,
    Kind,
)


class World:
    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise InvalidExtent(rows, cols)
        self._rows = rows
        self._cols = cols
        self._prey: tuple[Animal, ...] = ()
        self._predators: tuple[Animal, ...] = ()
        self._next_id: int = 0

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def extent(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def prey(self) -> tuple[Animal, ...]:
        return self._prey

    @property
    def predators(self) -> tuple[Animal, ...]:
        return self._predators

    @property
    def next_id(self) -> int:
        return self._next_id

    def spawn(
        self, kind: Kind, row: int, col: int, facing: int, stability: int = 0
    ) -> EntityId:
        """Validate and add an initial animal. Returns its identity."""
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise InvalidPosition(row, col, self._rows, self._cols)
        if facing not in (0, 1, 2, 3):
            raise InvalidFacing(facing)
        if stability < 0:
            raise InvalidStability(stability)

        eid = self._next_id
        self._next_id += 1
        animal = Animal(
            kind=kind,
            eid=eid,
            row=row,
            col=col,
            facing=Facing(facing),
            stability=stability,
        )
        if kind is Kind.PREY:
            self._prey += (animal,)
        else:
            self._predators += (animal,)
        return eid

    def evolve(
        self,
        prey: tuple[Animal, ...] | None = None,
        predators: tuple[Animal, ...] | None = None,
        next_id: int | None = None,
    ) -> World:
        """Return a successor world; unspecified parts are shared with this one."""
        successor = World.__new__(World)
        successor._rows = self._rows
        successor._cols = self._cols
        successor._prey = self._prey if prey is None else tuple(prey)
        successor._predators = (
            self._predators if predators is None else tuple(predators)
        )
        successor._next_id = self._next_id if next_id is None else next_id
        return successor

    def population(self, kind: Kind) -> tuple[Animal, ...]:
        return self._prey if kind is Kind.PREY else self._predators

    def entities(self) -> Iterator[Animal]:
        yield from self._prey
        yield from self._predators

    def at(self, row: int, col: int) -> list[Animal]:
        return [a for a in self.entities() if a.row == row and a.col == col]

    def census(self) -> dict[Kind, int]:
        return {Kind.PREY: len(self._prey), Kind.PREDATOR: len(self._predators)}

    def __repr__(self) -> str:
        return (
            f"World({self._rows}x{self._cols}, prey={len(self._prey)}, "
            f"predators={len(self._predators)}, next_id={self._next_id})"
        )
