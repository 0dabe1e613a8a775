from __future__ import annotations

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from entanglement_rl.game import Action


ROTATIONS = 6


class PlacementActionWrapper(gym.Wrapper):
    """Turns (pocket choice, rotation) into one Discrete(12) action that places a tile.

    Order: pocket-major, idx = use_pocket * 6 + right_rotations. The primitive
    steps are forwarded to the wrapped env and their rewards summed.
    """

    def __init__(self, env: gym.Env):
        super().__init__(env)
        assert isinstance(env.action_space, spaces.Discrete)
        self.n = 2 * ROTATIONS
        self.action_space = spaces.Discrete(self.n)

    @staticmethod
    def decode(idx: int) -> tuple[bool, int]:
        return bool(idx // ROTATIONS), int(idx % ROTATIONS)

    def _primitive_actions(self, idx: int) -> list[Action]:
        use_pocket, rotations = self.decode(idx)
        actions: list[Action] = []
        if use_pocket:
            actions.append(Action.USE_POCKET)
        actions.extend([Action.ROTATE_RIGHT] * rotations)
        actions.append(Action.PLACE)
        return actions

    def step(self, action):  # type: ignore[override]
        total = 0.0
        result = None
        for primitive in self._primitive_actions(int(action)):
            obs, reward, terminated, truncated, info = self.env.step(int(primitive))
            total += float(reward)
            result = (obs, total, terminated, truncated, info)
            if terminated or truncated:
                break
        assert result is not None
        return result

    def get_action_mask(self) -> np.ndarray:
        over = self.env.unwrapped.game.is_game_over()
        return np.full((self.n,), not over, dtype=np.bool_)
