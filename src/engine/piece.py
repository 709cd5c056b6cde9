"""
チェッカーのマス・駒・手番を定義するモジュール
"""

from enum import Enum, IntEnum
from typing import NamedTuple, Optional


class Side(Enum):
    """手番（プレイヤー）の定義"""
    WHITE = 1  # 先手（白）- 盤面下側から上へ進む
    BLACK = 2  # 後手（黒）- 盤面上側から下へ進む

    @property
    def opponent(self) -> 'Side':
        """相手の手番を返す"""
        return Side.BLACK if self == Side.WHITE else Side.WHITE

    @property
    def forward(self) -> int:
        """前進方向の行の増分（白は-1、黒は+1）"""
        return -1 if self == Side.WHITE else 1

    @property
    def promotion_row(self) -> int:
        """成る（キングになる）行"""
        return 0 if self == Side.WHITE else 7


class Cell(IntEnum):
    """マスの状態（整数値はそのままJSONの表現になる）"""
    EMPTY = 0
    WHITE_MAN = 1
    BLACK_MAN = 2
    WHITE_KING = 3
    BLACK_KING = 4

    @property
    def is_king(self) -> bool:
        return self in (Cell.WHITE_KING, Cell.BLACK_KING)

    @property
    def owner(self) -> Optional[Side]:
        """駒の持ち主（空マスはNone）"""
        if self in (Cell.WHITE_MAN, Cell.WHITE_KING):
            return Side.WHITE
        if self in (Cell.BLACK_MAN, Cell.BLACK_KING):
            return Side.BLACK
        return None

    def promoted(self) -> 'Cell':
        """成った後の駒を返す（キングと空マスはそのまま）"""
        return PROMOTIONS.get(self, self)


PROMOTIONS = {
    Cell.WHITE_MAN: Cell.WHITE_KING,
    Cell.BLACK_MAN: Cell.BLACK_KING,
}

# 盤面表示用の記号
CELL_SYMBOLS = {
    Cell.EMPTY: ".",
    Cell.WHITE_MAN: "w",
    Cell.BLACK_MAN: "b",
    Cell.WHITE_KING: "W",
    Cell.BLACK_KING: "B",
}


class Position(NamedTuple):
    """盤面上の座標 (row, col)。タプルと同じように比較・ハッシュできる"""
    row: int
    col: int

    @property
    def index(self) -> int:
        """0..63 のマス番号（捕獲済みビットセットのインデックス）"""
        return self.row * 8 + self.col

    def offset(self, dr: int, dc: int, dist: int = 1) -> 'Position':
        return Position(self.row + dr * dist, self.col + dc * dist)

    def to_dict(self) -> dict:
        return {"r": self.row, "c": self.col}

    @staticmethod
    def from_dict(data: dict) -> 'Position':
        return Position(int(data["r"]), int(data["c"]))
