"""
ミニマックス探索（αβ枝刈り）による手の選択

評価値は常に黒が有利なほど大きい（黒のマン+10、黒のキング+100、
白のマン-10、白のキング-100）。perspective に手番を渡すと、その手番から
見た評価値（白なら符号反転）で末端を評価する。best_move は探索する手番を
perspective に渡すので、白番でも黒番でも自分に有利な手を選ぶ。
"""

import logging
from typing import Optional, Tuple

import numpy as np

from ..engine.board import Board
from ..engine.move import Move
from ..engine.piece import Cell, Side
from ..engine.rules import Rules
from ..engine.simulator import apply_move

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_DEPTH = 3

# 駒の価値（黒が正）
PIECE_VALUES = {
    Cell.EMPTY: 0,
    Cell.WHITE_MAN: -10,
    Cell.BLACK_MAN: 10,
    Cell.WHITE_KING: -100,
    Cell.BLACK_KING: 100,
}

# Cellの整数コードで引ける価値テーブル
_VALUE_TABLE = np.array([PIECE_VALUES[cell] for cell in Cell], dtype=np.int64)


def evaluate(board: Board) -> int:
    """盤面の駒得を評価する（黒が有利なほど大きい）"""
    return int(_VALUE_TABLE[board.grid].sum())


def _score(board: Board, perspective: Optional[Side]) -> int:
    value = evaluate(board)
    return -value if perspective == Side.WHITE else value


def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    side: Side,
    alpha: float,
    beta: float,
    rng: Optional[np.random.Generator] = None,
    perspective: Optional[Side] = None
) -> Tuple[float, Optional[Move]]:
    """
    αβ枝刈り付きミニマックス

    Args:
        board: 盤面
        depth: 残りの探索深さ（プライ）
        maximizing: この局面で評価値を最大化するか
        side: この局面で手を指す手番
        alpha, beta: 探索窓
        rng: 手の並びをシャッフルする乱数生成器（Noneなら毎回新しく作る）
        perspective: 末端の評価をどちらの手番から見るか（Noneなら黒）

    Returns:
        (評価値, 最善手)。深さ0または合法手がない局面では (評価値, None)
    """
    if depth == 0:
        return _score(board, perspective), None

    all_moves = Rules.all_moves(board, side)
    if not all_moves:
        return _score(board, perspective), None

    if rng is None:
        rng = np.random.default_rng()

    # 同点の手からの選択をばらつかせるためにシャッフル
    order = rng.permutation(len(all_moves))
    all_moves = [all_moves[i] for i in order]

    best_move = None

    if maximizing:
        max_eval = float('-inf')
        for move in all_moves:
            new_board = apply_move(board, move)
            score, _ = minimax(
                new_board, depth - 1, False, side.opponent,
                alpha, beta, rng, perspective
            )
            if score > max_eval:
                max_eval = score
                best_move = move
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return max_eval, best_move

    min_eval = float('inf')
    for move in all_moves:
        new_board = apply_move(board, move)
        score, _ = minimax(
            new_board, depth - 1, True, side.opponent,
            alpha, beta, rng, perspective
        )
        if score < min_eval:
            min_eval = score
            best_move = move
        beta = min(beta, score)
        if beta <= alpha:
            break
    return min_eval, best_move


def best_move(
    board: Board,
    side: Side,
    depth: int = DEFAULT_SEARCH_DEPTH,
    rng: Optional[np.random.Generator] = None
) -> Optional[Move]:
    """
    指定した手番の最善手を探索する

    探索中の例外は外に出さずに None を返す（合法手がない場合と同じ扱い）。
    """
    try:
        _, move = minimax(
            board, depth, True, side,
            float('-inf'), float('inf'),
            rng=rng, perspective=side
        )
        return move
    except Exception:
        logger.exception("探索中にエラーが発生しました (side=%s)", side)
        return None
