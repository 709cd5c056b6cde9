"""
チェッカーの手（Move）を表現するモジュール
"""

from typing import Iterable, Optional, Tuple

from .piece import Position


class Move:
    """
    チェッカーの一手を表すクラス

    連続ジャンプを含む一手全体を表す。captured は取った駒の位置を
    取った順に保持する（通常の移動では空）。
    """

    __slots__ = ("from_pos", "to_pos", "captured")

    def __init__(
        self,
        from_pos: Tuple[int, int],
        to_pos: Tuple[int, int],
        captured: Optional[Iterable[Tuple[int, int]]] = None
    ):
        self.from_pos = Position(*from_pos)
        self.to_pos = Position(*to_pos)
        self.captured: Tuple[Position, ...] = tuple(
            Position(*pos) for pos in (captured or ())
        )

    @property
    def is_capture(self) -> bool:
        return len(self.captured) > 0

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return (
            self.from_pos == other.from_pos
            and self.to_pos == other.to_pos
            and self.captured == other.captured
        )

    def __hash__(self):
        return hash((self.from_pos, self.to_pos, self.captured))

    def __str__(self):
        if self.is_capture:
            captured = ", ".join(str(tuple(pos)) for pos in self.captured)
            return f"{tuple(self.from_pos)} x {tuple(self.to_pos)} [{captured}]"
        return f"{tuple(self.from_pos)} -> {tuple(self.to_pos)}"

    def __repr__(self):
        return (
            f"Move(from={tuple(self.from_pos)}, to={tuple(self.to_pos)}, "
            f"captured={[tuple(pos) for pos in self.captured]})"
        )

    def to_dict(self) -> dict:
        """手を辞書形式に変換（API用）"""
        return {
            "from": self.from_pos.to_dict(),
            "to": self.to_pos.to_dict(),
            "captured": [pos.to_dict() for pos in self.captured],
        }

    @staticmethod
    def from_dict(data: dict) -> 'Move':
        """辞書形式から手を復元（API用）"""
        return Move(
            from_pos=Position.from_dict(data["from"]),
            to_pos=Position.from_dict(data["to"]),
            captured=[Position.from_dict(pos) for pos in data.get("captured") or []]
        )

    @staticmethod
    def create_normal_move(
        from_pos: Tuple[int, int],
        to_pos: Tuple[int, int]
    ) -> 'Move':
        """通常の移動手を作成"""
        return Move(from_pos, to_pos)

    @staticmethod
    def create_capture_move(
        from_pos: Tuple[int, int],
        to_pos: Tuple[int, int],
        captured: Iterable[Tuple[int, int]]
    ) -> 'Move':
        """駒を取る手（連続ジャンプを含む）を作成"""
        return Move(from_pos, to_pos, captured)
