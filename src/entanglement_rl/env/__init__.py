"""Gymnasium environments for Entanglement RL."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Primitive actions: rotate right, rotate left, use pocket, place
register(
    id="Entanglement-v0",
    entry_point="entanglement_rl.env.entanglement_env:EntanglementEnv",
)

__all__ = ["Entanglement-v0"]
