from __future__ import annotations

import pytest

from entanglement_rl.game import Board, GameOverError, InvalidTileError, PieceKind, Tile


def test_layout():
    board = Board()
    assert board.size == 9
    assert board.tile_at((4, 4)).kind == PieceKind.CENTER
    assert board.count(PieceKind.CENTER) == 1
    assert board.count(PieceKind.BORDER) == 24
    assert board.count(PieceKind.EMPTY) == 36
    assert board.count(PieceKind.PLACEHOLDER) == 20
    assert board.tile_at((0, 0)).kind == PieceKind.BORDER
    assert board.tile_at((8, 8)).kind == PieceKind.BORDER
    assert board.tile_at((1, 5)).kind == PieceKind.BORDER
    assert board.tile_at((0, 5)).kind == PieceKind.PLACEHOLDER
    assert board.tile_at((1, 1)).kind == PieceKind.EMPTY


def test_initial_state():
    board = Board()
    assert board.next_place == (5, 5)
    assert not board.finished
    assert len(board.path) == 1
    assert board.path.last_output() == 0


def test_format_board():
    rows = Board().format_board().splitlines()
    assert len(rows) == 9
    assert rows[0] == "xxxxx____"
    assert rows[4] == "xooo0ooox"
    assert rows[8] == "____xxxxx"


def test_single_step_stops_on_empty_cell(diagonal):
    board = Board()
    result = board.place_tile(Tile.normal(diagonal))
    assert [item.coord for item in result.segment] == [(5, 5)]
    assert result.segment[0].entry == 7
    assert result.segment[0].exit == 0
    assert board.next_place == (6, 6)
    assert not board.finished
    assert board.tile_at((5, 5)).kind == PieceKind.NORMAL


def test_chain_into_center_finishes(back_to_center):
    board = Board()
    result = board.place_tile(Tile.normal(back_to_center))
    assert len(result) == 1
    assert result.finished
    assert board.finished
    assert board.next_place == (4, 4)


def test_walk_into_border(diagonal):
    board = Board()
    board.place_tile(Tile.normal(diagonal))
    board.place_tile(Tile.normal(diagonal))
    result = board.place_tile(Tile.normal(diagonal))
    assert [item.coord for item in result.segment] == [(7, 7)]
    assert board.finished
    assert board.next_place == (8, 8)
    assert board.path.coords() == [(4, 4), (5, 5), (6, 6), (7, 7)]


def test_cascade_through_placed_tiles(diagonal):
    board = Board()
    board.tiles[6][6] = Tile.normal(diagonal)
    board.tiles[7][7] = Tile.normal(diagonal)
    result = board.find_future_path(Tile.normal(diagonal))
    assert [item.coord for item in result.segment] == [(5, 5), (6, 6), (7, 7)]
    assert result.finished
    assert result.next_place == (8, 8)


def test_cascade_turning_back(diagonal, back_to_center):
    board = Board()
    board.place_tile(Tile.normal(diagonal))
    # (6, 6) sends the chain back into (5, 5), which leaves through pin 2
    result = board.place_tile(Tile.normal(back_to_center))
    assert [item.coord for item in result.segment] == [(6, 6), (5, 5)]
    assert [(item.entry, item.exit) for item in result.segment] == [(7, 6), (1, 2)]
    assert board.next_place == (6, 5)
    assert not board.finished


def test_find_future_path_is_pure(diagonal):
    board = Board()
    board.tiles[6][6] = Tile.normal(diagonal)
    candidate = Tile.normal(diagonal)
    first = board.find_future_path(candidate)
    second = board.find_future_path(candidate)
    assert first == second
    assert board.next_place == (5, 5)
    assert not board.finished
    assert len(board.path) == 1
    assert board.tile_at((5, 5)).kind == PieceKind.EMPTY


def test_dry_run_matches_commit(diagonal, back_to_center):
    board = Board()
    board.place_tile(Tile.normal(diagonal))
    candidate = Tile.normal(back_to_center)
    predicted = board.find_future_path(candidate)
    committed = board.place_tile(candidate)
    assert predicted == committed


def test_finished_board_rejects_moves(back_to_center, diagonal):
    board = Board()
    board.place_tile(Tile.normal(back_to_center))
    with pytest.raises(GameOverError):
        board.place_tile(Tile.normal(diagonal))
    with pytest.raises(GameOverError):
        board.find_future_path(Tile.normal(diagonal))


def test_only_normal_tiles_can_be_placed():
    board = Board()
    with pytest.raises(InvalidTileError):
        board.find_future_path(Tile.border())
    with pytest.raises(InvalidTileError):
        board.place_tile(Tile.empty())


def test_tag_grid_and_path_mask(diagonal):
    board = Board()
    board.place_tile(Tile.normal(diagonal))
    tags = board.tag_grid()
    assert tags.shape == (9, 9)
    assert tags[5, 5] == 4
    assert tags[4, 4] == 3
    mask = board.path_mask()
    assert mask[4, 4] and mask[5, 5]
    assert mask.sum() == 2


def test_incomplete_normal_tile_is_rejected_before_placing():
    board = Board()
    with pytest.raises(InvalidTileError):
        board.place_tile(Tile())
    with pytest.raises(InvalidTileError):
        board.find_future_path(Tile(PieceKind.NORMAL, [(7, 0)]))
    assert board.tile_at((5, 5)).kind == PieceKind.EMPTY
    assert len(board.path) == 1
    assert board.next_place == (5, 5)


def test_failed_cascade_leaves_board_untouched(diagonal):
    board = Board()
    # a broken tile already on the grid, reached after (5, 5)
    board.tiles[6][6] = Tile(PieceKind.NORMAL, [(0, 1)])
    with pytest.raises(InvalidTileError):
        board.place_tile(Tile.normal(diagonal))
    assert board.tile_at((5, 5)).kind == PieceKind.EMPTY
    assert len(board.path) == 1
    assert board.next_place == (5, 5)
    assert not board.finished
