from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

from .errors import GameOverError
from .generators import PieceGenerator, RandomPieceGenerator
from .grid import Board
from .pieces import Tile
from .rules import points_for_path


class Action(IntEnum):
    ROTATE_RIGHT = 0
    ROTATE_LEFT = 1
    USE_POCKET = 2
    PLACE = 3


@dataclass
class GameConfig:
    radius: int = 4
    random_seed: Optional[int] = None
    max_episode_steps: int = 1000


class EntanglementGame:
    """One game: a board, the upcoming tile, the pocket tile and the score."""

    def __init__(self, config: Optional[GameConfig] = None, generator: Optional[PieceGenerator] = None) -> None:
        self.config = config or GameConfig()
        self.generator: PieceGenerator = generator or RandomPieceGenerator(self.config.random_seed)
        self.board = Board(self.config.radius)
        self.score = 0
        self.tiles_placed = 0
        self.longest_chain = 0
        self.step_count = 0
        self.upcoming = self.generate_piece()
        self.pocket = self.generate_piece()

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.generator.seed(seed)
        self.board = Board(self.config.radius)
        self.score = 0
        self.tiles_placed = 0
        self.longest_chain = 0
        self.step_count = 0
        self.upcoming = self.generate_piece()
        self.pocket = self.generate_piece()

    def generate_piece(self) -> Tile:
        return self.generator.next_piece()

    def is_game_over(self) -> bool:
        return self.board.is_path_finished()

    def use_pocket(self) -> None:
        self.pocket, self.upcoming = self.upcoming, self.pocket

    def rotate_upcoming(self, direction: int) -> None:
        self.upcoming.rotate(direction)

    def rotate_upcoming_right(self) -> None:
        self.upcoming.rotate_right()

    def rotate_upcoming_left(self) -> None:
        self.upcoming.rotate_left()

    def preview_points(self) -> int:
        """Points the upcoming tile would score if placed as it is now."""
        return points_for_path(self.board.find_future_path(self.upcoming).segment)

    def place_tile(self) -> int:
        if self.is_game_over():
            raise GameOverError("game is over")
        points = self.preview_points()
        result = self.board.place_tile(self.upcoming)
        self.upcoming = self.generate_piece()
        self.score += points
        self.tiles_placed += 1
        self.longest_chain = max(self.longest_chain, len(result.segment))
        return points

    def step(self, action: Action) -> Tuple[Dict[str, Any], int, bool, Dict[str, Any]]:
        if self.is_game_over():
            return self.get_state(), 0, True, {}

        reward = 0
        if action == Action.ROTATE_RIGHT:
            self.rotate_upcoming_right()
        elif action == Action.ROTATE_LEFT:
            self.rotate_upcoming_left()
        elif action == Action.USE_POCKET:
            self.use_pocket()
        elif action == Action.PLACE:
            reward = self.place_tile()
        self.step_count += 1

        info = {
            "score": self.score,
            "tiles_placed": self.tiles_placed,
        }
        return self.get_state(), reward, self.is_game_over(), info

    @property
    def state(self) -> str:
        return (
            f"Is over: {self.is_game_over()}\n"
            f"Next tile: {self.upcoming}\n"
            f"Pocket: {self.pocket}\n"
            f"Path: {self.board.path}"
        )

    def get_state(self) -> Dict[str, Any]:
        return {
            "grid": self.board.tag_grid(),
            "path": self.board.path_mask(),
            "upcoming": self.upcoming.partner_array(),
            "pocket": self.pocket.partner_array(),
            "next_place": self.board.next_place,
            "score": self.score,
            "game_over": self.is_game_over(),
        }

    def get_game_stats(self) -> Dict[str, Any]:
        return {
            "final_score": self.score,
            "tiles_placed": self.tiles_placed,
            "path_length": len(self.board.path) - 1,
            "longest_chain": self.longest_chain,
            "steps_taken": self.step_count,
            "avg_score_per_tile": self.score / max(1, self.tiles_placed),
        }
