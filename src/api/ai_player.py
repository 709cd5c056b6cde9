"""
API用 AIプレイヤー
難易度に応じた深さでミニマックス探索を行う
"""

import logging
from typing import Optional

import numpy as np

from ..engine.board import Board
from ..engine.move import Move
from ..engine.piece import Side
from ..ai.search import best_move, evaluate, DEFAULT_SEARCH_DEPTH

logger = logging.getLogger(__name__)


class CheckersAI:
    """
    チェッカーAI - ミニマックス + αβ枝刈り

    難易度レベル:
    - easy: 深さ1（1手先の駒得だけを見る）
    - medium: 深さ3
    - hard: 深さ4
    """

    DIFFICULTY_SETTINGS = {
        'easy': {'depth': 1},
        'medium': {'depth': DEFAULT_SEARCH_DEPTH},
        'hard': {'depth': 4},
    }
    DEFAULT_DIFFICULTY = 'medium'

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: 同点の手のシャッフルに使う乱数のシード（Noneなら毎回異なる）
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def depth_for(self, difficulty: str) -> int:
        settings = self.DIFFICULTY_SETTINGS.get(
            difficulty, self.DIFFICULTY_SETTINGS[self.DEFAULT_DIFFICULTY]
        )
        return settings['depth']

    def get_best_move(
        self,
        board: Board,
        side: Side,
        difficulty: str = DEFAULT_DIFFICULTY
    ) -> Optional[Move]:
        """
        最善手を取得

        Returns:
            最善手。合法手がない（または探索に失敗した）場合は None
        """
        depth = self.depth_for(difficulty)
        move = best_move(board, side, depth=depth, rng=self.rng)
        logger.debug("AI選択: %s (side=%s, depth=%d)", move, side.name, depth)
        return move

    def evaluate_position(self, board: Board, side: Side) -> int:
        """
        局面を評価（駒得）

        Returns:
            正の値: 指定した手番が有利
            負の値: 相手が有利
        """
        value = evaluate(board)
        return -value if side == Side.WHITE else value


# シングルトンインスタンス（サーバー起動時に1回だけ初期化）
_ai_instance: Optional[CheckersAI] = None


def get_ai() -> CheckersAI:
    """AIインスタンスを取得（遅延初期化）"""
    global _ai_instance
    if _ai_instance is None:
        _ai_instance = CheckersAI()
    return _ai_instance


def reload_ai(seed: Optional[int] = None) -> CheckersAI:
    """AIを作り直す（シードを変えたいとき）"""
    global _ai_instance
    _ai_instance = CheckersAI(seed=seed)
    return _ai_instance
