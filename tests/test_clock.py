"""Tests for the tick counter."""

from tick_predprey.clock import Clock
from tick_predprey.types import TickContext


def test_clock_starts_at_zero():
    clock = Clock()
    assert clock.tick_number == 0
    assert clock.context() == TickContext(tick_number=0)


def test_advance_returns_new_tick():
    clock = Clock()
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_context_tracks_current_tick():
    clock = Clock()
    clock.advance()
    clock.advance()
    clock.advance()
    assert clock.context().tick_number == 3
