#!/usr/bin/env python
"""
ミニマックスAIの強さを測定するスクリプト
対Random AI, 対Greedy AIでの勝率・引き分け率を測定
"""

import os
import sys
import json

import numpy as np
from tqdm import tqdm

# プロジェクトルートをパスに追加
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from src.engine import GameState, Rules, Side
from src.ai.search import best_move


class RandomAI:
    """完全ランダムに手を選ぶAI"""

    def __init__(self, rng):
        self.name = "Random"
        self.rng = rng

    def get_move(self, board, side):
        legal_moves = Rules.all_moves(board, side)
        if not legal_moves:
            return None
        return legal_moves[self.rng.integers(len(legal_moves))]


class GreedyAI:
    """貪欲法AI - 一番多く取れる手を優先"""

    def __init__(self, rng):
        self.name = "Greedy"
        self.rng = rng

    def get_move(self, board, side):
        legal_moves = Rules.all_moves(board, side)
        if not legal_moves:
            return None

        best_count = max(len(move.captured) for move in legal_moves)
        candidates = [move for move in legal_moves if len(move.captured) == best_count]
        return candidates[self.rng.integers(len(candidates))]


class MinimaxAI:
    """ミニマックス + αβ枝刈り"""

    def __init__(self, rng, depth=3):
        self.name = f"Minimax-D{depth}"
        self.rng = rng
        self.depth = depth

    def get_move(self, board, side):
        return best_move(board, side, depth=self.depth, rng=self.rng)


def play_game(white_ai, black_ai, max_moves=200):
    """
    2つのAI同士を対戦させる

    Returns:
        (winner, num_moves, end_reason)
    """
    state = GameState()
    position_history = {}

    while len(state.move_history) < max_moves:
        if state.is_over:
            return state.winner, len(state.move_history), "NO_LEGAL_MOVES"

        ai = white_ai if state.turn == Side.WHITE else black_ai
        move = ai.get_move(state.board, state.turn)

        if move is None:
            state.resign(state.turn)
            return state.winner, len(state.move_history), "NO_MOVE_RETURNED"

        state.play(move)
        if state.is_over:
            return state.winner, len(state.move_history), "NO_LEGAL_MOVES"

        position_key = (hash(state.board), state.turn)
        position_history[position_key] = position_history.get(position_key, 0) + 1
        if position_history[position_key] >= 3:
            return None, len(state.move_history), "REPETITION"

    return None, max_moves, "MAX_MOVES"


def run_evaluation(games_per_side=5, depth=3, seed=None):
    """ベースラインAIとの対戦で評価を実行"""
    rng = np.random.default_rng(seed)
    minimax_ai = MinimaxAI(rng, depth=depth)
    results = {}

    for opponent in (RandomAI(rng), GreedyAI(rng)):
        print(f"\n  vs {opponent.name} AI ({games_per_side * 2} games)...")
        wins, draws, losses = 0, 0, 0

        for _ in tqdm(range(games_per_side), desc="    as White"):
            winner, _, _ = play_game(minimax_ai, opponent)
            if winner == Side.WHITE:
                wins += 1
            elif winner is None:
                draws += 1
            else:
                losses += 1

        for _ in tqdm(range(games_per_side), desc="    as Black"):
            winner, _, _ = play_game(opponent, minimax_ai)
            if winner == Side.BLACK:
                wins += 1
            elif winner is None:
                draws += 1
            else:
                losses += 1

        total_games = games_per_side * 2
        results[opponent.name] = {
            "win": wins / total_games * 100,
            "draw": draws / total_games * 100,
            "loss": losses / total_games * 100,
        }
        print(f"  → vs {opponent.name}: Win={results[opponent.name]['win']:.1f}%, "
              f"Draw={results[opponent.name]['draw']:.1f}%")

    return results


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description='Measure minimax strength')
    parser.add_argument('--games', type=int, default=5,
                        help='Games per side per opponent')
    parser.add_argument('--depth', type=int, default=3,
                        help='Search depth in plies')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed')
    parser.add_argument('--output', type=str, default=None,
                        help='Write results as JSON to this path')
    args = parser.parse_args()

    print(f"{'='*60}")
    print(f"Minimax (depth={args.depth}) の評価を開始します")
    print(f"{'='*60}")

    results = run_evaluation(args.games, depth=args.depth, seed=args.seed)

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(results, f, indent=2)
        print(f"\nResults Saved: {args.output}")

    print("\n" + "="*60)
    print("評価完了！")
    print("="*60)
