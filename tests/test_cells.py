"""Tests for the cell value objects."""

import dataclasses

import pytest

from wator.cells import EMPTY, CellKind, Empty, Fish, Shark


def test_kinds():
    assert EMPTY.kind is CellKind.EMPTY
    assert Fish().kind is CellKind.FISH
    assert Shark(energy=3).kind is CellKind.SHARK


def test_is_organism():
    assert not EMPTY.is_organism
    assert Fish().is_organism
    assert Shark(energy=1).is_organism


def test_fresh_fish_defaults():
    fish = Fish()
    assert fish.repro_counter == 0
    assert fish.last_tick == 0


def test_cells_compare_by_value():
    assert Empty() == EMPTY
    assert Fish(1, 2) == Fish(1, 2)
    assert Shark(3, 1, 0) != Shark(2, 1, 0)


def test_cells_are_immutable():
    shark = Shark(energy=4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        shark.energy = 5
