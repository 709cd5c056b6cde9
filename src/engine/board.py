"""
チェッカーの盤面を管理するモジュール
"""

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .exceptions import InvalidBoardError, InvalidPositionError
from .piece import Cell, Position, Side, CELL_SYMBOLS

# 盤面サイズ
BOARD_SIZE = 8
# 初期配置で駒を並べる段数（各プレイヤー）
BACK_ROWS = 3


class Board:
    """
    8x8 のチェッカー盤面

    マスの値は Cell の整数コードで numpy 配列（int8）に保持する。
    行0が盤面の上端（黒の陣地側）。
    """

    def __init__(self, grid: Optional[Sequence[Sequence[int]]] = None):
        if grid is None:
            self.grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
            return

        try:
            raw = np.array(grid)
            array = raw.astype(np.int64)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidBoardError(str(e)) from e

        if raw.dtype.kind not in "iub":
            raise InvalidBoardError(f"マスの値は整数であるべきです（{raw.dtype}）")
        if array.shape != (BOARD_SIZE, BOARD_SIZE):
            raise InvalidBoardError(f"盤面の形が {array.shape} です（8x8であるべき）")
        if array.min() < min(Cell) or array.max() > max(Cell):
            raise InvalidBoardError("未定義のマスの値が含まれています")

        self.grid = array.astype(np.int8)

    @classmethod
    def initial(cls) -> 'Board':
        """
        標準の初期配置を作成
        黒: 0-2行目、白: 5-7行目の暗いマス（row + col が奇数）
        """
        board = cls()
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if (row + col) % 2 != 1:
                    continue
                if row < BACK_ROWS:
                    board.grid[row, col] = Cell.BLACK_MAN
                elif row >= BOARD_SIZE - BACK_ROWS:
                    board.grid[row, col] = Cell.WHITE_MAN
        return board

    @staticmethod
    def is_valid_position(position: Tuple[int, int]) -> bool:
        """位置が盤面内か確認"""
        row, col = position
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get_cell(self, position: Tuple[int, int]) -> Cell:
        """指定位置のマスを取得"""
        if not self.is_valid_position(position):
            raise InvalidPositionError(position)
        row, col = position
        return Cell(int(self.grid[row, col]))

    def set_cell(self, position: Tuple[int, int], cell: Cell):
        """
        指定位置にマスの値を書き込む
        盤面の組み立て用。手の適用には simulator.apply_move を使う
        """
        if not self.is_valid_position(position):
            raise InvalidPositionError(position)
        row, col = position
        self.grid[row, col] = Cell(cell)

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        return self.get_cell(position)

    def is_empty(self, position: Tuple[int, int]) -> bool:
        return self.get_cell(position) == Cell.EMPTY

    def pieces(self, side: Optional[Side] = None) -> Iterator[Tuple[Position, Cell]]:
        """駒のある位置を行優先で列挙（sideを指定するとその手番の駒のみ）"""
        rows, cols = np.nonzero(self.grid)
        for row, col in zip(rows.tolist(), cols.tolist()):
            cell = Cell(int(self.grid[row, col]))
            if side is None or cell.owner == side:
                yield Position(row, col), cell

    def count(self, cell: Cell) -> int:
        """指定された駒の数"""
        return int(np.count_nonzero(self.grid == cell))

    def copy(self) -> 'Board':
        """盤面のコピーを作成"""
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __hash__(self):
        return hash(self.grid.tobytes())

    def __str__(self):
        """盤面の文字列表現を返す"""
        result = ["  " + " ".join(str(i) for i in range(BOARD_SIZE))]
        for row in range(BOARD_SIZE):
            symbols = " ".join(
                CELL_SYMBOLS[Cell(int(v))] for v in self.grid[row]
            )
            result.append(f"{row} {symbols}")
        return "\n".join(result)

    def __repr__(self):
        return f"Board({self.to_list()!r})"

    def to_list(self) -> List[List[int]]:
        """盤面を行優先の整数リストに変換（API用）"""
        return self.grid.astype(int).tolist()

    @staticmethod
    def from_list(data: Sequence[Sequence[int]]) -> 'Board':
        """整数リストから盤面を復元（API用）"""
        return Board(data)

    @staticmethod
    def from_text(text: str) -> 'Board':
        """
        記号で書かれた盤面を読み込む（テスト・デバッグ用）
        各行8文字: . = 空, w/b = 白/黒のマン, W/B = 白/黒のキング
        空白は無視する
        """
        symbol_to_cell = {symbol: cell for cell, symbol in CELL_SYMBOLS.items()}
        lines = [line.replace(" ", "") for line in text.strip().splitlines()]
        lines = [line for line in lines if line]
        try:
            grid = [[int(symbol_to_cell[ch]) for ch in line] for line in lines]
        except KeyError as e:
            raise InvalidBoardError(f"未定義の記号 {e}") from e
        return Board(grid)
