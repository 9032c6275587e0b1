"""Scenario text parser.

The format is a flat stream of whitespace-separated integers::

    N M K
    R F
    row col facing stability    (R prey lines)
    row col facing stability    (F predator lines)

Line breaks carry no meaning; only the token order does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tick_predprey.types import Kind, ScenarioError
from tick_predprey.world import World


@dataclass(frozen=True)
class Scenario:
    world: World
    steps: int


def _integers(text: str) -> Iterator[int]:
    for index, token in enumerate(text.split()):
        try:
            yield int(token)
        except ValueError:
            raise ScenarioError(
                f"Token {index} is not an integer: {token!r}"
            ) from None


def _take(tokens: Iterator[int], what: str) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ScenarioError(f"Unexpected end of input, expected {what}") from None


def _count(tokens: Iterator[int], what: str) -> int:
    value = _take(tokens, what)
    if value < 0:
        raise ScenarioError(f"{what} must be non-negative, got {value}")
    return value


def parse_scenario(text: str) -> Scenario:
    """Build the initial world and step count described by *text*.

    Prey are spawned before predators, in input order, so they receive the
    lowest identities.

    Raises:
        ScenarioError: If the text is not a well-formed token stream.
        WorldConfigError: If the extent or an animal is invalid.
    """
    tokens = _integers(text)
    rows = _take(tokens, "row count")
    cols = _take(tokens, "column count")
    steps = _count(tokens, "step count")
    prey_count = _count(tokens, "prey count")
    predator_count = _count(tokens, "predator count")

    world = World(rows, cols)
    for kind, count in ((Kind.PREY, prey_count), (Kind.PREDATOR, predator_count)):
        for i in range(count):
            label = f"{kind.value} #{i}"
            row = _take(tokens, f"{label} row")
            col = _take(tokens, f"{label} column")
            facing = _take(tokens, f"{label} facing")
            stability = _take(tokens, f"{label} stability")
            world.spawn(kind, row, col, facing, stability)

    extra = next(tokens, None)
    if extra is not None:
        raise ScenarioError(f"Unexpected trailing input: {extra}")
    return Scenario(world=world, steps=steps)
