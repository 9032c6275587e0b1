"""Character-grid rendering of a world's population density.

Each cell shows ``(#prey) - (#predators)`` standing on it, or a placeholder
when that difference is zero. A cell holding equal numbers of prey and
predators therefore looks the same as an empty one; the output format keeps
this ambiguity deliberately.
"""

from __future__ import annotations

from tick_predprey.world import World

EMPTY = "*"


def density(world: World) -> list[list[int]]:
    field = [[0] * world.cols for _ in range(world.rows)]
    for prey in world.prey:
        field[prey.row][prey.col] += 1
    for predator in world.predators:
        field[predator.row][predator.col] -= 1
    return field


def render_lines(world: World, empty: str = EMPTY) -> list[str]:
    return [
        "".join(str(net) if net else empty for net in row)
        for row in density(world)
    ]


def render(world: World, empty: str = EMPTY) -> str:
    return "".join(line + "\n" for line in render_lines(world, empty))
