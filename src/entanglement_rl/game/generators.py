from __future__ import annotations

import itertools
import random
from typing import Iterable, List, Optional, Protocol, Sequence

from .pieces import NUM_PINS, Connection, Tile


class PieceGenerator(Protocol):
    def next_piece(self) -> Tile:
        ...

    def seed(self, seed: Optional[int]) -> None:
        ...


class RandomPieceGenerator:
    """Uniform random pairing of the 12 pins into 6 connections."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def next_piece(self) -> Tile:
        pool = list(range(NUM_PINS))
        connections: List[Connection] = []
        while pool:
            a = pool.pop(self.rng.randrange(len(pool)))
            b = pool.pop(self.rng.randrange(len(pool)))
            connections.append((a, b))
        return Tile.normal(connections)


class ScriptedPieceGenerator:
    """Hands out fixed pairings in order, starting over when exhausted."""

    def __init__(self, pieces: Iterable[Sequence[Connection]]) -> None:
        self._pieces = [Tile.normal(connections) for connections in pieces]
        if not self._pieces:
            raise ValueError("ScriptedPieceGenerator needs at least one piece")
        self._cycle = itertools.cycle(self._pieces)

    def seed(self, seed: Optional[int]) -> None:
        # No randomness to seed: start the script over
        self._cycle = itertools.cycle(self._pieces)

    def next_piece(self) -> Tile:
        return next(self._cycle).copy()
