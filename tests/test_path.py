from __future__ import annotations

import pytest

from entanglement_rl.game import EmptyPathError, InvalidTileError, Path
from entanglement_rl.game.path import offset_for_pin, step_from
from entanglement_rl.game.pieces import entry_pin


def test_direction_table():
    assert offset_for_pin(0) == offset_for_pin(1) == (1, 1)
    assert offset_for_pin(2) == offset_for_pin(3) == (1, 0)
    assert offset_for_pin(4) == offset_for_pin(5) == (0, -1)
    assert offset_for_pin(6) == offset_for_pin(7) == (-1, -1)
    assert offset_for_pin(8) == offset_for_pin(9) == (-1, 0)
    assert offset_for_pin(10) == offset_for_pin(11) == (0, 1)


def test_entry_pin_points_back_where_we_came_from():
    for pin in range(12):
        dr, dc = offset_for_pin(pin)
        assert offset_for_pin(entry_pin(pin)) == (-dr, -dc)


def test_out_of_range_pin_is_invalid():
    with pytest.raises(InvalidTileError):
        offset_for_pin(12)
    with pytest.raises(InvalidTileError):
        step_from((4, 4), -3)


def test_empty_path_has_no_last_output():
    path = Path()
    with pytest.raises(EmptyPathError):
        path.last_output()
    with pytest.raises(EmptyPathError):
        path.last()


def test_expand_and_str():
    path = Path.starting_at((4, 4))
    path.expand((5, 5), 7, 2)
    assert len(path) == 2
    assert path.last_output() == 2
    assert path.coords() == [(4, 4), (5, 5)]
    assert str(path) == "x -> [4, 4] 0 -> 0 -> [5, 5] 7 -> 2"


def test_seeded_path_does_not_share_items():
    path = Path.starting_at((4, 4))
    scratch = Path.seeded_from(path.last())
    scratch.expand((5, 5), 7, 0)
    assert len(path) == 1
    assert len(scratch) == 2
