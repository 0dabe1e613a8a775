from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import EmptyPathError
from .pieces import PINS_PER_EDGE, Pin, check_pin


Coordinate = Tuple[int, int]

# (drow, dcol) for each hex edge; edge index = exit pin // 2
EDGE_OFFSETS: Tuple[Coordinate, ...] = (
    (1, 1),
    (1, 0),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (0, 1),
)


def offset_for_pin(pin: Pin) -> Coordinate:
    check_pin(pin)
    return EDGE_OFFSETS[pin // PINS_PER_EDGE]


def step_from(coord: Coordinate, exit_pin: Pin) -> Coordinate:
    """Cell reached by leaving `coord` through `exit_pin`."""
    dr, dc = offset_for_pin(exit_pin)
    return coord[0] + dr, coord[1] + dc


@dataclass(frozen=True)
class PathItem:
    coord: Coordinate
    entry: Pin
    exit: Pin

    def __str__(self) -> str:
        return f"[{self.coord[0]}, {self.coord[1]}] {self.entry} -> {self.exit}"


class Path:
    """Append-only trace of the cells the chain has crossed."""

    def __init__(self) -> None:
        self.items: List[PathItem] = []

    @classmethod
    def starting_at(cls, center: Coordinate) -> "Path":
        # The center tile is entered and left through pin 0
        path = cls()
        path.expand(center, 0, 0)
        return path

    @classmethod
    def seeded_from(cls, item: PathItem) -> "Path":
        path = cls()
        path.items.append(item)
        return path

    def expand(self, coord: Coordinate, entry: Pin, exit: Pin) -> PathItem:
        item = PathItem((int(coord[0]), int(coord[1])), int(entry), int(exit))
        self.items.append(item)
        return item

    def last(self) -> PathItem:
        if not self.items:
            raise EmptyPathError("path has no items")
        return self.items[-1]

    def last_output(self) -> Pin:
        return self.last().exit

    def coords(self) -> List[Coordinate]:
        return [item.coord for item in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[PathItem]:
        return iter(self.items)

    def __str__(self) -> str:
        return "x" + "".join(f" -> {item}" for item in self.items)
