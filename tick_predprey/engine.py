"""Engine - phase pipeline, run loop, and lifecycle hooks."""

from __future__ import annotations

import logging
from typing import Callable

from tick_predprey.clock import Clock
from tick_predprey.components import Animal
from tick_predprey.events import Born, Chronicle, Died, Eaten
from tick_predprey.systems import (
    BirthCallback,
    DeathCallback,
    EatenCallback,
    make_aging_system,
    make_death_system,
    make_movement_system,
    make_predation_system,
    make_reproduction_system,
    make_rotation_system,
)
from tick_predprey.types import Kind, System, TickContext
from tick_predprey.world import World

logger = logging.getLogger(__name__)

Hook = Callable[[World, TickContext], None]


class Engine:
    """Applies the tick pipeline to worlds.

    Phase order is fixed: movement, predation, aging, rotation,
    reproduction, death. The engine holds no world of its own; ``step`` and
    ``run`` take a world and return its successor, leaving the input intact.
    """

    def __init__(self, chronicle: Chronicle | None = None) -> None:
        self._clock = Clock()
        self._chronicle = chronicle
        self._start_hooks: list[Hook] = []
        self._tick_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []

        on_eaten = on_birth = on_death = None
        if chronicle is not None:
            on_eaten, on_birth, on_death = _recorders(chronicle)

        # Order matters: each phase sees the world the previous one produced.
        self._systems: tuple[System, ...] = (
            make_movement_system(),
            make_predation_system(on_eaten),
            make_aging_system(),
            make_rotation_system(),
            make_reproduction_system(on_birth),
            make_death_system(on_death),
        )

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def chronicle(self) -> Chronicle | None:
        return self._chronicle

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_tick(self, hook: Hook) -> None:
        self._tick_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _tick(self, world: World) -> World:
        self._clock.advance()
        ctx = self._clock.context()
        for system in self._systems:
            world = system(world, ctx)
        logger.debug(
            "tick %d: %d prey, %d predators",
            ctx.tick_number, len(world.prey), len(world.predators),
        )
        for hook in self._tick_hooks:
            hook(world, ctx)
        return world

    def step(self, world: World) -> World:
        return self._tick(world)

    def run(self, world: World, steps: int) -> World:
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        ctx = self._clock.context()
        for hook in self._start_hooks:
            hook(world, ctx)
        logger.info(
            "running %d steps on %dx%d grid (%d prey, %d predators)",
            steps, world.rows, world.cols, len(world.prey), len(world.predators),
        )

        for _ in range(steps):
            world = self._tick(world)

        census = world.census()
        logger.info(
            "finished at tick %d: %d prey, %d predators",
            self._clock.tick_number, census[Kind.PREY], census[Kind.PREDATOR],
        )
        ctx = self._clock.context()
        for hook in self._stop_hooks:
            hook(world, ctx)
        return world


def _recorders(
    chronicle: Chronicle,
) -> tuple[EatenCallback, BirthCallback, DeathCallback]:
    """Build phase callbacks that write into *chronicle*."""

    def on_eaten(world: World, ctx: TickContext, predator: Animal, prey: Animal) -> None:
        chronicle.record(Eaten(
            tick=ctx.tick_number, predator=predator.eid, prey=prey.eid,
            row=prey.row, col=prey.col,
        ))

    def on_birth(world: World, ctx: TickContext, parent: Animal, child: Animal) -> None:
        chronicle.record(Born(
            tick=ctx.tick_number, kind=child.kind, parent=parent.eid,
            child=child.eid, row=child.row, col=child.col,
        ))

    def on_death(world: World, ctx: TickContext, animal: Animal, cause: str) -> None:
        chronicle.record(Died(
            tick=ctx.tick_number, kind=animal.kind, eid=animal.eid, age=animal.age,
        ))

    return on_eaten, on_birth, on_death


def step(world: World) -> World:
    """Apply one tick to *world* and return the successor."""
    return Engine().step(world)


def run(world: World, steps: int) -> World:
    """Apply *steps* ticks to *world* and return the final world."""
    return Engine().run(world, steps)
