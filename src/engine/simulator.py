"""
手を盤面に適用するモジュール
"""

from .board import Board
from .exceptions import IllegalMoveError
from .move import Move
from .piece import Cell


def apply_move(board: Board, move: Move) -> Board:
    """
    盤面に手を適用した新しい盤面を返す（元の盤面は変更しない）

    1. 取った駒のマスをすべて空にする
    2. 駒を移動元から移動先へ動かす
    3. 一手全体が終わった移動先でのみ成りを判定する
       （白のマンが0行目、黒のマンが7行目に着いたらキング）
    """
    piece = board.get_cell(move.from_pos)
    if piece == Cell.EMPTY:
        raise IllegalMoveError(move, "移動元に駒がありません")
    if move.to_pos != move.from_pos and not board.is_empty(move.to_pos):
        raise IllegalMoveError(move, "移動先に駒があります")

    new_board = board.copy()

    for pos in move.captured:
        new_board.set_cell(pos, Cell.EMPTY)

    new_board.set_cell(move.from_pos, Cell.EMPTY)
    if piece.owner.promotion_row == move.to_pos.row:
        piece = piece.promoted()
    new_board.set_cell(move.to_pos, piece)

    return new_board
