"""System factories for the six phases of a simulation tick.

Each system takes the world as it stands after the previous phase and
returns a new world; the input is never mutated. The engine runs them in
the order they are listed here.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Callable

from tick_predprey.components import Animal

if TYPE_CHECKING:
    from tick_predprey.types import System, TickContext
    from tick_predprey.world import World

EatenCallback = Callable[["World", "TickContext", Animal, Animal], None]
BirthCallback = Callable[["World", "TickContext", Animal, Animal], None]
DeathCallback = Callable[["World", "TickContext", Animal, str], None]


def make_movement_system() -> System:
    """Return a system that moves every animal along its facing, with wraparound."""

    def movement_system(world: World, ctx: TickContext) -> World:
        rows, cols = world.extent
        return world.evolve(
            prey=tuple(a.moved(rows, cols) for a in world.prey),
            predators=tuple(a.moved(rows, cols) for a in world.predators),
        )

    return movement_system


def make_predation_system(on_eaten: EatenCallback | None = None) -> System:
    """Return a system where predators eat the prey sharing their cell.

    Predators feed in ascending identity order. Each one takes every prey
    still standing on its cell, so a prey is eaten at most once and a junior
    predator never takes prey from a senior one. *on_eaten* is invoked with
    ``(world, ctx, predator, prey)`` for every prey removed.
    """

    def predation_system(world: World, ctx: TickContext) -> World:
        by_cell: dict[tuple[int, int], list[Animal]] = {}
        for prey in world.prey:
            by_cell.setdefault(prey.position, []).append(prey)

        eaten: set[int] = set()
        predators: list[Animal] = []
        for predator in sorted(world.predators, key=lambda a: a.eid):
            meal = by_cell.pop(predator.position, [])
            for prey in meal:
                eaten.add(prey.eid)
                if on_eaten is not None:
                    on_eaten(world, ctx, predator, prey)
            predators.append(predator.fed(len(meal)) if meal else predator)

        return world.evolve(
            prey=tuple(p for p in world.prey if p.eid not in eaten),
            predators=tuple(predators),
        )

    return predation_system


def make_aging_system() -> System:
    def aging_system(world: World, ctx: TickContext) -> World:
        return world.evolve(
            prey=tuple(a.aged() for a in world.prey),
            predators=tuple(a.aged() for a in world.predators),
        )

    return aging_system


def make_rotation_system() -> System:
    """Return a system that turns animals whose age closes a stability period."""

    def rotation_system(world: World, ctx: TickContext) -> World:
        return world.evolve(
            prey=tuple(a.rotated() for a in world.prey),
            predators=tuple(a.rotated() for a in world.predators),
        )

    return rotation_system


def make_reproduction_system(on_birth: BirthCallback | None = None) -> System:
    """Return a system that spawns one offspring per eligible parent.

    Prey breed at the ages listed in their rules; predators breed once they
    have eaten enough and then start counting food from zero. Newborns are
    appended after every parent has been considered, prey first, and take
    identities from the world's counter in that order.
    """

    def reproduction_system(world: World, ctx: TickContext) -> World:
        next_id = world.next_id
        births: list[tuple[Animal, Animal]] = []

        prey_born: list[Animal] = []
        for parent in world.prey:
            if parent.wants_offspring():
                child = parent.offspring(next_id)
                next_id += 1
                prey_born.append(child)
                births.append((parent, child))

        predators: list[Animal] = []
        predators_born: list[Animal] = []
        for parent in world.predators:
            if parent.wants_offspring():
                child = parent.offspring(next_id)
                next_id += 1
                predators_born.append(child)
                births.append((parent, child))
                parent = dataclasses.replace(parent, food=0)
            predators.append(parent)

        if on_birth is not None:
            for parent, child in births:
                on_birth(world, ctx, parent, child)

        return world.evolve(
            prey=world.prey + tuple(prey_born),
            predators=tuple(predators) + tuple(predators_born),
            next_id=next_id,
        )

    return reproduction_system


def make_death_system(on_death: DeathCallback | None = None) -> System:
    """Return a system that removes animals at or past their maximum age.

    *on_death*, if provided, is invoked before removal with
    ``(world, ctx, animal, "old_age")``.
    """

    def death_system(world: World, ctx: TickContext) -> World:
        if on_death is not None:
            for animal in world.entities():
                if animal.is_dead:
                    on_death(world, ctx, animal, "old_age")
        return world.evolve(
            prey=tuple(a for a in world.prey if not a.is_dead),
            predators=tuple(a for a in world.predators if not a.is_dead),
        )

    return death_system
