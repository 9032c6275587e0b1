"""Chronicle of what happened to individual animals during a run.

Three record types cover every change in population: a prey ``Eaten`` by a
predator, an offspring ``Born`` to a parent, and an animal that ``Died`` of
old age. Records are kept in emission order, which is tick order and, within
a tick, phase order.
"""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Iterator, TypeVar, Union

from tick_predprey.types import EntityId, Kind


@dataclass(frozen=True, slots=True)
class Eaten:
    tick: int
    predator: EntityId
    prey: EntityId
    row: int
    col: int

    def involves(self, eid: EntityId) -> bool:
        return eid in (self.predator, self.prey)


@dataclass(frozen=True, slots=True)
class Born:
    tick: int
    kind: Kind
    parent: EntityId
    child: EntityId
    row: int
    col: int

    def involves(self, eid: EntityId) -> bool:
        return eid in (self.parent, self.child)


@dataclass(frozen=True, slots=True)
class Died:
    tick: int
    kind: Kind
    eid: EntityId
    age: int

    def involves(self, eid: EntityId) -> bool:
        return eid == self.eid


Record = Union[Eaten, Born, Died]
R = TypeVar("R", Eaten, Born, Died)


class Chronicle:
    def __init__(self, max_records: int = 0) -> None:
        maxlen = max_records if max_records > 0 else None
        self._records: deque[Record] = deque(maxlen=maxlen)

    def record(self, entry: Record) -> None:
        self._records.append(entry)

    def of(self, rtype: type[R], tick: int | None = None) -> list[R]:
        """All records of *rtype*, optionally limited to one tick."""
        return [
            r for r in self._records
            if isinstance(r, rtype) and (tick is None or r.tick == tick)
        ]

    def history(self, eid: EntityId) -> list[Record]:
        """Every record the animal *eid* took part in, oldest first."""
        return [r for r in self._records if r.involves(eid)]

    def births(self, kind: Kind | None = None) -> list[Born]:
        return [b for b in self.of(Born) if kind is None or b.kind is kind]

    def deaths(self, kind: Kind | None = None) -> list[Died]:
        return [d for d in self.of(Died) if kind is None or d.kind is kind]

    def offspring_of(self, parent: EntityId) -> list[EntityId]:
        return [b.child for b in self.of(Born) if b.parent == parent]

    def meals_of(self, predator: EntityId) -> list[EntityId]:
        return [e.prey for e in self.of(Eaten) if e.predator == predator]

    def totals(self) -> dict[type, int]:
        return dict(Counter(type(r) for r in self._records))

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
