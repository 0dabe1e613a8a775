"""Game module for Entanglement RL.

Exports the core game engine and supporting classes:
- Tile, PieceKind, RenderTag: hex tiles with 12 pins and their kinds
- Path, PathItem: the trace of cells the chain has crossed
- Board: hexagonal grid and chain propagation
- RandomPieceGenerator, ScriptedPieceGenerator: sources of new tiles
- EntanglementGame: pocket, upcoming tile, score and turn handling
"""

from .errors import EmptyPathError, EntanglementError, GameOverError, InvalidTileError
from .pieces import PieceKind, RenderTag, Tile
from .path import Path, PathItem
from .grid import Board, PropagationResult, print_board
from .rules import points_for_length, points_for_path
from .generators import PieceGenerator, RandomPieceGenerator, ScriptedPieceGenerator
from .core import Action, EntanglementGame, GameConfig

__all__ = [
    "EntanglementError",
    "GameOverError",
    "InvalidTileError",
    "EmptyPathError",
    "Tile",
    "PieceKind",
    "RenderTag",
    "Path",
    "PathItem",
    "Board",
    "PropagationResult",
    "print_board",
    "points_for_length",
    "points_for_path",
    "PieceGenerator",
    "RandomPieceGenerator",
    "ScriptedPieceGenerator",
    "Action",
    "EntanglementGame",
    "GameConfig",
]
