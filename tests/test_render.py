"""Tests for density grids and character rendering."""

from tick_predprey.render import density, render, render_lines
from tick_predprey.types import Kind
from tick_predprey.world import World


def test_empty_world_renders_placeholders():
    assert render(World(2, 3)) == "***\n***\n"


def test_density_counts_prey_minus_predators():
    world = World(2, 2)
    world.spawn(Kind.PREY, 0, 0, 0)
    world.spawn(Kind.PREY, 0, 0, 0)
    world.spawn(Kind.PREDATOR, 0, 0, 0)
    world.spawn(Kind.PREDATOR, 1, 1, 0)
    assert density(world) == [[1, 0], [0, -1]]


def test_negative_counts_keep_sign():
    world = World(1, 2)
    world.spawn(Kind.PREDATOR, 0, 1, 0)
    world.spawn(Kind.PREDATOR, 0, 1, 0)
    assert render_lines(world) == ["*-2"]


def test_multi_digit_counts():
    world = World(1, 1)
    for _ in range(12):
        world.spawn(Kind.PREY, 0, 0, 0)
    assert render(world) == "12\n"


def test_balanced_cell_renders_like_empty_cell():
    world = World(1, 2)
    world.spawn(Kind.PREY, 0, 0, 0)
    world.spawn(Kind.PREDATOR, 0, 0, 0)
    assert render_lines(world) == ["**"]


def test_custom_placeholder():
    world = World(1, 3)
    world.spawn(Kind.PREY, 0, 1, 0)
    assert render_lines(world, empty=".") == [".1."]


def test_rows_follow_grid_rows():
    world = World(3, 2)
    world.spawn(Kind.PREY, 2, 1, 0)
    assert render_lines(world) == ["**", "**", "*1"]
