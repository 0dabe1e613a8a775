from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from .errors import GameOverError, InvalidTileError
from .path import Coordinate, Path, PathItem, step_from
from .pieces import (
    RENDER_SYMBOLS,
    PieceKind,
    RenderTag,
    Tile,
    check_pairing,
    is_terminal,
    is_traversable,
)


@dataclass
class PropagationResult:
    segment: List[PathItem]
    next_place: Coordinate
    finished: bool

    def __len__(self) -> int:
        return len(self.segment)


def hex_distance(a: Coordinate, b: Coordinate) -> int:
    dr = a[0] - b[0]
    dc = a[1] - b[1]
    return max(abs(dr), abs(dc), abs(dr - dc))


class Board:
    """Hexagonal board stored in a (2r+1)x(2r+1) diamond grid.

    Cells at hex distance r from the center are the border wall, cells
    closer in are playable, cells further out are placeholders that the
    chain can never reach.
    """

    def __init__(self, radius: int = 4) -> None:
        self.radius = int(radius)
        self.size = 2 * self.radius + 1
        self.center: Coordinate = (self.radius, self.radius)
        self.tiles: List[List[Tile]] = [
            [self._initial_tile((row, col)) for col in range(self.size)] for row in range(self.size)
        ]
        self.path = Path.starting_at(self.center)
        self.next_place: Coordinate = step_from(self.center, self.path.last_output())
        self.finished = False

    def _initial_tile(self, coord: Coordinate) -> Tile:
        d = hex_distance(coord, self.center)
        if d == 0:
            return Tile.center()
        if d < self.radius:
            return Tile.empty()
        if d == self.radius:
            return Tile.border()
        return Tile.placeholder()

    def tile_at(self, coord: Coordinate) -> Tile:
        return self.tiles[coord[0]][coord[1]]

    def is_path_finished(self) -> bool:
        return self.finished

    def _trace(self, candidate: Tile, origin: Coordinate, path: Path) -> PropagationResult:
        """Follow the chain from `origin`, appending to `path` as it goes.

        `candidate` is read at `origin` whether or not it has been written
        to the grid yet, so a dry run and a commit walk the same cells.
        """
        segment: List[PathItem] = []
        current = origin
        finished = False
        while True:
            tile = candidate if current == origin else self.tile_at(current)
            if is_terminal(tile.kind):
                finished = True
                break
            if not is_traversable(tile.kind):
                break
            last_exit = path.last_output()
            segment.append(
                path.expand(current, tile.input(last_exit), tile.output_from_neighbour_output(last_exit))
            )
            next_coord = step_from(current, segment[-1].exit)
            if next_coord == current:
                break
            current = next_coord
        return PropagationResult(segment, current, finished)

    def _check_candidate(self, candidate: Tile) -> None:
        if self.finished:
            raise GameOverError("path is already finished")
        if candidate.kind != PieceKind.NORMAL:
            raise InvalidTileError(f"cannot place a {candidate.kind.name.lower()} tile")
        check_pairing(candidate.connections)

    def find_future_path(self, candidate: Tile) -> PropagationResult:
        """Dry run: where the chain would go if `candidate` were placed now."""
        self._check_candidate(candidate)
        scratch = Path.seeded_from(self.path.last())
        return self._trace(candidate, self.next_place, scratch)

    def place_tile(self, candidate: Tile) -> PropagationResult:
        self._check_candidate(candidate)
        origin = self.next_place
        # Trace on a scratch path so a failure leaves the board untouched
        result = self._trace(candidate, origin, Path.seeded_from(self.path.last()))
        self.tiles[origin[0]][origin[1]] = candidate
        self.path.items.extend(result.segment)
        self.next_place = result.next_place
        if result.finished:
            self.finished = True
        return result

    def tag_grid(self) -> np.ndarray:
        tags = np.zeros((self.size, self.size), dtype=np.int8)
        for row in range(self.size):
            for col in range(self.size):
                tags[row, col] = int(self.tiles[row][col].render_tag)
        return tags

    def path_mask(self) -> np.ndarray:
        mask = np.zeros((self.size, self.size), dtype=np.bool_)
        for row, col in self.path.coords():
            mask[row, col] = True
        return mask

    def count(self, kind: PieceKind) -> int:
        return sum(1 for row in self.tiles for tile in row if tile.kind == kind)

    def format_board(self) -> str:
        return "\n".join(
            "".join(RENDER_SYMBOLS[RenderTag(int(v))] for v in row) for row in self.tag_grid()
        )


def print_board(board: Board) -> None:
    print(board.format_board())
