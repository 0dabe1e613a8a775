from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import FrozenSet, Iterable, List, Set, Tuple

import numpy as np

from .errors import InvalidTileError


NUM_PINS = 12
PINS_PER_EDGE = 2

Pin = int
Connection = Tuple[Pin, Pin]


class PieceKind(IntEnum):
    PLACEHOLDER = 0  # outside the hexagon
    EMPTY = 1  # playable cell waiting for a tile
    BORDER = 2
    CENTER = 3
    NORMAL = 4  # placed player tile


class RenderTag(IntEnum):
    PLACEHOLDER = 0
    EMPTY = 1
    BORDER = 2
    CENTER = 3
    OCCUPIED = 4


RENDER_SYMBOLS = {
    RenderTag.PLACEHOLDER: "_",
    RenderTag.EMPTY: "o",
    RenderTag.BORDER: "x",
    RenderTag.CENTER: "0",
    RenderTag.OCCUPIED: "@",
}

# RGB palette shared by the pygame renderer and rgb_array frames
TAG_COLORS = {
    RenderTag.PLACEHOLDER: (10, 10, 14),
    RenderTag.EMPTY: (30, 30, 36),
    RenderTag.BORDER: (90, 90, 100),
    RenderTag.CENTER: (240, 200, 60),
    RenderTag.OCCUPIED: (45, 60, 90),
}
PATH_COLOR = (240, 120, 60)

_RENDER_TAGS = {
    PieceKind.PLACEHOLDER: RenderTag.PLACEHOLDER,
    PieceKind.EMPTY: RenderTag.EMPTY,
    PieceKind.BORDER: RenderTag.BORDER,
    PieceKind.CENTER: RenderTag.CENTER,
    PieceKind.NORMAL: RenderTag.OCCUPIED,
}


def is_terminal(kind: PieceKind) -> bool:
    """Border and center end the chain and the game."""
    return kind in (PieceKind.BORDER, PieceKind.CENTER)


def is_traversable(kind: PieceKind) -> bool:
    return kind == PieceKind.NORMAL


def render_tag(kind: PieceKind) -> RenderTag:
    return _RENDER_TAGS[kind]


def check_pin(pin: int) -> Pin:
    if not 0 <= pin < NUM_PINS:
        raise InvalidTileError(f"pin {pin} is outside 0..{NUM_PINS - 1}")
    return pin


def entry_pin(neighbour_exit: Pin) -> Pin:
    """Pin facing `neighbour_exit` on the tile the chain moves into."""
    check_pin(neighbour_exit)
    if neighbour_exit % 2 == 0:
        return (neighbour_exit + NUM_PINS - 5) % NUM_PINS
    return (neighbour_exit + NUM_PINS + 5) % NUM_PINS


def check_pairing(connections: List[Connection]) -> None:
    pins = sorted(p for pair in connections for p in pair)
    if pins != list(range(NUM_PINS)):
        raise InvalidTileError(f"connections {connections} do not pair every pin exactly once")


@dataclass
class Tile:
    """A hex tile: a set of undirected pin-to-pin connections.

    Pins are numbered 0..11 clockwise, two per edge. Rotating by one step
    turns the tile by 60 degrees, i.e. shifts every pin by two.
    """

    kind: PieceKind = PieceKind.NORMAL
    connections: List[Connection] = field(default_factory=list)

    @classmethod
    def normal(cls, connections: Iterable[Connection]) -> "Tile":
        conns = [(int(a), int(b)) for a, b in connections]
        check_pairing(conns)
        return cls(PieceKind.NORMAL, conns)

    @classmethod
    def center(cls) -> "Tile":
        return cls(PieceKind.CENTER, [(0, 0)])

    @classmethod
    def border(cls) -> "Tile":
        return cls(PieceKind.BORDER)

    @classmethod
    def empty(cls) -> "Tile":
        return cls(PieceKind.EMPTY)

    @classmethod
    def placeholder(cls) -> "Tile":
        return cls(PieceKind.PLACEHOLDER)

    @property
    def render_tag(self) -> RenderTag:
        return render_tag(self.kind)

    def output(self, pin: Pin) -> Pin:
        for a, b in self.connections:
            if a == pin:
                return b
            if b == pin:
                return a
        raise InvalidTileError(f"{self.kind.name.lower()} tile has no connection for pin {pin}")

    def input(self, neighbour_exit: Pin) -> Pin:
        return entry_pin(neighbour_exit)

    def output_from_neighbour_output(self, neighbour_exit: Pin) -> Pin:
        return self.output(self.input(neighbour_exit))

    def rotate(self, steps: int) -> None:
        shift = steps * PINS_PER_EDGE
        self.connections = [((a + shift) % NUM_PINS, (b + shift) % NUM_PINS) for a, b in self.connections]

    def rotate_right(self) -> None:
        self.rotate(1)

    def rotate_left(self) -> None:
        self.rotate(-1)

    def rotated(self, steps: int) -> "Tile":
        tile = self.copy()
        tile.rotate(steps)
        return tile

    def copy(self) -> "Tile":
        return Tile(self.kind, list(self.connections))

    def pairings(self) -> Set[FrozenSet[Pin]]:
        return {frozenset(pair) for pair in self.connections}

    def partner_array(self) -> np.ndarray:
        """partner[p] is the pin connected to p, -1 where p is unconnected."""
        partner = np.full((NUM_PINS,), -1, dtype=np.int8)
        for a, b in self.connections:
            partner[a] = b
            partner[b] = a
        return partner

    def __str__(self) -> str:
        return str(self.connections)
