from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from entanglement_rl.game import Action, EntanglementGame, GameConfig, PieceGenerator, RenderTag
from entanglement_rl.game.pieces import NUM_PINS, PATH_COLOR, TAG_COLORS


class EntanglementEnv(gym.Env):
    """One tile per PLACE action; rotations and pocket swaps are free moves."""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 generator: Optional[PieceGenerator] = None,
                 step_penalty: float = 0.0,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        self.game = EntanglementGame(config, generator)
        self.render_mode = render_mode

        self.step_penalty = float(step_penalty)
        self.terminal_penalty = float(terminal_penalty)

        size = self.game.board.size
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=len(RenderTag) - 1, shape=(size, size), dtype=np.int8),
                "path": spaces.Box(low=0, high=1, shape=(size, size), dtype=np.int8),
                # partner pin for each of the 12 pins
                "upcoming": spaces.Box(low=-1, high=NUM_PINS - 1, shape=(NUM_PINS,), dtype=np.int8),
                "pocket": spaces.Box(low=-1, high=NUM_PINS - 1, shape=(NUM_PINS,), dtype=np.int8),
                "next_place": spaces.Box(low=0, high=size - 1, shape=(2,), dtype=np.int64),
            }
        )
        self.action_space = spaces.Discrete(len(Action))

        self._last_obs: Optional[Dict[str, Any]] = None
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        board = self.game.board
        obs: Dict[str, Any] = {
            "grid": board.tag_grid(),
            "path": board.path_mask().astype(np.int8),
            "upcoming": self.game.upcoming.partner_array(),
            "pocket": self.game.pocket.partner_array(),
            "next_place": np.array(board.next_place, dtype=np.int64),
        }
        return obs

    def _get_info(self) -> Dict[str, Any]:
        over = self.game.is_game_over()
        info: Dict[str, Any] = {
            "action_mask": np.full((len(Action),), not over, dtype=np.bool_),
            "score": self.game.score,
            "tiles_placed": self.game.tiles_placed,
            "preview_points": 0 if over else self.game.preview_points(),
            "steps": self._steps,
        }
        return info

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        obs = self._get_obs()
        info = self._get_info()
        self._last_obs = obs
        return obs, info

    def step(self, action: int):
        action = Action(int(action))

        reward_components: Dict[str, float] = {"step": self.step_penalty}
        points = 0
        if not self.game.is_game_over():
            _, points, _, _ = self.game.step(action)
            reward_components["points"] = float(points)

        terminated = bool(self.game.is_game_over())
        self._steps += 1
        truncated = not terminated and self._steps >= self.game.config.max_episode_steps
        if terminated:
            reward_components["terminal"] = self.terminal_penalty

        reward = float(sum(reward_components.values()))

        obs = self._get_obs()
        info = self._get_info()
        info["reward_components"] = reward_components
        info["engine_score_delta"] = float(points)
        self._last_obs = obs
        return obs, reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self._last_obs["grid"] if self._last_obs is not None else self.game.board.tag_grid()
            path = self._last_obs["path"] if self._last_obs is not None else self.game.board.path_mask()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    color = PATH_COLOR if path[y, x] else TAG_COLORS[RenderTag(int(grid[y, x]))]
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        # human rendering lives in entanglement_rl.visualization
        return None

    def close(self) -> None:
        pass
