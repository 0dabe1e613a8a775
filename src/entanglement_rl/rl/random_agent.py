from __future__ import annotations

import gymnasium as gym

import entanglement_rl.env  # noqa: F401
from entanglement_rl.env.wrappers import PlacementActionWrapper


def run_random(steps: int = 200, seed: int | None = None) -> float:
    env = PlacementActionWrapper(gym.make("Entanglement-v0"))
    env.action_space.seed(seed)
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    episodes = 0
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            episodes += 1
            obs, info = env.reset()
    env.close()
    print(f"Random agent total reward: {total_reward:.2f} over {episodes} finished games")
    return total_reward


if __name__ == "__main__":  # pragma: no cover
    run_random()
