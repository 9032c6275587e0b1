"""tick-predprey - A deterministic predator-prey tick engine on a toroidal grid."""

from tick_predprey.clock import Clock
from tick_predprey.components import Animal
from tick_predprey.engine import Engine, run, step
from tick_predprey.events import Born, Chronicle, Died, Eaten
from tick_predprey.parsers import Scenario, parse_scenario
from tick_predprey.render import density, render, render_lines
from tick_predprey.types import (
    RULES,
    EntityId,
    Facing,
    InvalidExtent,
    InvalidFacing,
    InvalidPosition,
    InvalidStability,
    Kind,
    KindRules,
    ScenarioError,
    TickContext,
    WorldConfigError,
)
from tick_predprey.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "Animal",
    "Facing",
    "Kind",
    "KindRules",
    "RULES",
    "TickContext",
    "EntityId",
    "Chronicle",
    "Eaten",
    "Born",
    "Died",
    "Scenario",
    "parse_scenario",
    "step",
    "run",
    "density",
    "render",
    "render_lines",
    "WorldConfigError",
    "InvalidExtent",
    "InvalidPosition",
    "InvalidFacing",
    "InvalidStability",
    "ScenarioError",
]
