from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional, Tuple

from entanglement_rl.game import EntanglementGame, GameConfig, GameOverError, print_board
from entanglement_rl.game.rules import points_for_path


Move = Tuple[bool, int]  # (use pocket, right rotations)


def evaluate_moves(game: EntanglementGame) -> List[Tuple[Move, int, bool]]:
    """Dry-run every pocket choice and rotation; returns (move, points, finishes)."""
    results: List[Tuple[Move, int, bool]] = []
    for use_pocket, tile in ((False, game.upcoming), (True, game.pocket)):
        for rotations in range(6):
            future = game.board.find_future_path(tile.rotated(rotations))
            results.append(((use_pocket, rotations), points_for_path(future.segment), future.finished))
    return results


def best_move(game: EntanglementGame) -> Move:
    # Prefer moves that keep the game going, then the most points
    moves = evaluate_moves(game)
    move, _, _ = max(moves, key=lambda m: (not m[2], m[1]))
    return move


def random_move(game: EntanglementGame, rng: random.Random) -> Move:
    return rng.random() < 0.5, rng.randrange(6)


def apply_move(game: EntanglementGame, move: Move) -> int:
    use_pocket, rotations = move
    if use_pocket:
        game.use_pocket()
    game.rotate_upcoming(rotations)
    return game.place_tile()


def play_game(policy: str = "greedy", seed: Optional[int] = None, verbose: bool = True) -> EntanglementGame:
    game = EntanglementGame(GameConfig(random_seed=seed))
    rng = random.Random(seed)
    if verbose:
        print_board(game.board)
    while not game.is_game_over():
        move = best_move(game) if policy == "greedy" else random_move(game, rng)
        try:
            points = apply_move(game, move)
        except GameOverError:
            break
        if verbose:
            print("========")
            print_board(game.board)
            print(f"Points: {points}  Score: {game.score}")
    if verbose:
        print("========\nGame over")
    return game


def _print_progress(idx: int, total: int, last_score: int) -> None:
    width = 30
    filled = int(width * (idx + 1) / max(1, total))
    bar = "=" * filled + "." * (width - filled)
    msg = f"\r[{bar}] {idx + 1}/{total}  score={last_score}"
    print(msg, end="", file=sys.stdout, flush=True)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--policy", choices=["greedy", "random"], default="greedy")
    p.add_argument("--games", type=int, default=1)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()
    if args.games <= 1:
        game = play_game(args.policy, args.seed, verbose=True)
        print(game.state)
        print(f"Final score: {game.score}")
        return

    scores: List[int] = []
    for i in range(args.games):
        seed = None if args.seed is None else args.seed + i
        game = play_game(args.policy, seed, verbose=False)
        scores.append(game.score)
        _print_progress(i, args.games, game.score)
    print()
    print(f"{args.policy}: mean score {sum(scores) / len(scores):.1f}, best {max(scores)} over {len(scores)} games")


if __name__ == "__main__":  # pragma: no cover
    main()
