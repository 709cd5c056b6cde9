"""
対局の状態（手番・得点・勝者）を管理するモジュール
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .board import Board
from .exceptions import GameOverError, IllegalMoveError
from .move import Move
from .piece import Position, Side
from .rules import Rules
from .simulator import apply_move


class GameState:
    """
    1局分の状態

    - board: 現在の盤面
    - turn: 手番
    - scores: 各手番が取った駒の数
    - winner: 勝者（対局中はNone）
    - valid_moves: 現在の手番の合法手 {移動元: [Move, ...]}

    手番側に合法手がなくなった時点で対局終了となり、相手の勝ちとする。
    """

    def __init__(self, board: Optional[Board] = None, turn: Side = Side.WHITE):
        self.board = board if board is not None else Board.initial()
        self.turn = turn
        self.scores: Dict[Side, int] = {Side.WHITE: 0, Side.BLACK: 0}
        self.winner: Optional[Side] = None
        self.move_history: List[Move] = []
        self.valid_moves: Dict[Position, List[Move]] = {}
        self.refresh()

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def refresh(self):
        """合法手を再計算し、合法手がなければ対局を終了する"""
        if self.is_over:
            self.valid_moves = {}
            return
        self.valid_moves = Rules.get_legal_moves(self.board, self.turn)
        if not self.valid_moves:
            self.winner = self.turn.opponent

    def all_valid_moves(self) -> List[Move]:
        return [move for moves in self.valid_moves.values() for move in moves]

    def find_move(
        self,
        from_pos: Tuple[int, int],
        to_pos: Tuple[int, int],
        captured: Optional[Iterable[Tuple[int, int]]] = None
    ) -> Optional[Move]:
        """
        移動元と移動先から合法手を探す（UIでのクリック操作に相当）
        同じ着地点に複数の連続ジャンプがある場合は captured で区別する
        """
        candidates = [
            move for move in self.valid_moves.get(Position(*from_pos), [])
            if move.to_pos == Position(*to_pos)
        ]
        if captured is not None:
            wanted = tuple(Position(*pos) for pos in captured)
            candidates = [move for move in candidates if move.captured == wanted]
        return candidates[0] if candidates else None

    def play(self, move: Move) -> Board:
        """
        手を指す
        合法手でなければ IllegalMoveError、終了後なら GameOverError
        """
        if self.is_over:
            raise GameOverError()
        if move not in self.valid_moves.get(move.from_pos, []):
            raise IllegalMoveError(move, f"{self.turn.name}の合法手ではありません")

        self.board = apply_move(self.board, move)
        self.scores[self.turn] += len(move.captured)
        self.move_history.append(move)
        self.turn = self.turn.opponent
        self.refresh()
        return self.board

    def resign(self, side: Side):
        """投了する（相手の勝ち）"""
        if self.is_over:
            raise GameOverError()
        self.winner = side.opponent
        self.valid_moves = {}

    def to_dict(self) -> dict:
        """状態を辞書形式に変換（API・中継用）"""
        return {
            "board": self.board.to_list(),
            "turn": self.turn.name,
            "scores": {side.name: score for side, score in self.scores.items()},
            "winner": self.winner.name if self.winner else None,
            "valid_moves": {
                f"{pos.row},{pos.col}": [move.to_dict() for move in moves]
                for pos, moves in self.valid_moves.items()
            },
            "move_count": len(self.move_history),
            "move_history": [move.to_dict() for move in self.move_history],
        }

    @staticmethod
    def from_dict(data: dict) -> 'GameState':
        """辞書形式から状態を復元（合法手は盤面から再計算する）"""
        state = GameState(Board.from_list(data["board"]), Side[data["turn"]])
        scores = data.get("scores") or {}
        for side in Side:
            state.scores[side] = int(scores.get(side.name, 0))
        state.move_history = [Move.from_dict(move) for move in data.get("move_history") or []]
        if data.get("winner"):
            state.winner = Side[data["winner"]]
            state.valid_moves = {}
        return state
