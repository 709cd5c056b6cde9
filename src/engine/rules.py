"""
チェッカーのルール判定（合法手生成）を行うモジュール
"""

from typing import Dict, List, NamedTuple, Tuple

from .board import Board, BOARD_SIZE
from .move import Move
from .piece import Cell, Position, Side

# 斜め4方向
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class CaptureChain(NamedTuple):
    """連続ジャンプの探索結果: 最終着地点と取った駒の位置（取った順）"""
    landing: Position
    captured: Tuple[Position, ...]


class Rules:
    """チェッカーのルールを管理するクラス"""

    @staticmethod
    def get_legal_moves(board: Board, side: Side) -> Dict[Position, List[Move]]:
        """
        指定した手番の合法手をすべて取得
        返り値: {移動元の位置: その駒の合法手のリスト}

        取れる駒が一つでもあれば、取る手だけが合法手になる（強制取り）。
        その場合、取れない駒はキーに含まれない。
        """
        legal_moves: Dict[Position, List[Move]] = {}

        # 取る手（強制）
        for pos, cell in board.pieces(side):
            chains = Rules.get_capture_chains(board, pos, side, (), cell.is_king)
            if chains:
                legal_moves[pos] = [
                    Move.create_capture_move(pos, chain.landing, chain.captured)
                    for chain in chains
                ]

        if legal_moves:
            return legal_moves

        # 通常の移動
        for pos, cell in board.pieces(side):
            normal_moves = Rules._get_normal_moves(board, pos, side, cell.is_king)
            if normal_moves:
                legal_moves[pos] = normal_moves

        return legal_moves

    @staticmethod
    def all_moves(board: Board, side: Side) -> List[Move]:
        """合法手を一つのリストにまとめて返す（行優先の順）"""
        return [
            move
            for moves in Rules.get_legal_moves(board, side).values()
            for move in moves
        ]

    @staticmethod
    def has_capture(board: Board, side: Side) -> bool:
        """取る手が存在するか（強制取りが適用されるか）"""
        return any(
            Rules.get_capture_chains(board, pos, side, (), cell.is_king)
            for pos, cell in board.pieces(side)
        )

    @staticmethod
    def is_my_piece(cell: Cell, side: Side) -> bool:
        """マスの駒が指定した手番のものか（マン・キングの区別はしない）"""
        return Cell(cell).owner == side

    @staticmethod
    def _is_enemy(cell: Cell, side: Side) -> bool:
        owner = Cell(cell).owner
        return owner is not None and owner != side

    @staticmethod
    def _get_normal_moves(
        board: Board,
        from_pos: Position,
        side: Side,
        is_king: bool
    ) -> List[Move]:
        """
        取らない移動を取得
        マン: 前方の斜め1マス
        キング: 斜め4方向に障害物の手前まで何マスでも
        """
        moves = []
        max_dist = BOARD_SIZE - 1 if is_king else 1

        for dr, dc in DIRECTIONS:
            if not is_king and dr != side.forward:
                continue

            for dist in range(1, max_dist + 1):
                to_pos = from_pos.offset(dr, dc, dist)
                if not board.is_valid_position(to_pos):
                    break
                if not board.is_empty(to_pos):
                    break
                moves.append(Move.create_normal_move(from_pos, to_pos))

        return moves

    @staticmethod
    def get_capture_chains(
        board: Board,
        pos: Tuple[int, int],
        side: Side,
        captured: Tuple[Tuple[int, int], ...] = (),
        is_king: bool = False
    ) -> List[CaptureChain]:
        """
        pos から始まる最大の連続ジャンプをすべて取得

        盤面は書き換えず、取った駒の位置（順序付きタプル）と
        マス番号のビットセットを再帰で引き継ぐ。
        続きのジャンプがある場合は、途中で止まる短い連続ジャンプは返さない。
        途中で成る位置を通過しても is_king は変わらない。
        """
        captured = tuple(Position(*p) for p in captured)
        mask = 0
        for p in captured:
            mask |= 1 << p.index
        return Rules._search_chains(board, Position(*pos), side, captured, mask, is_king)

    @staticmethod
    def _search_chains(
        board: Board,
        pos: Position,
        side: Side,
        captured: Tuple[Position, ...],
        mask: int,
        is_king: bool
    ) -> List[CaptureChain]:
        chains: List[CaptureChain] = []

        for dr, dc in DIRECTIONS:
            if is_king:
                jumps = Rules._king_jumps(board, pos, side, dr, dc, mask)
            else:
                jumps = Rules._man_jumps(board, pos, side, dr, dc, mask)

            for enemy_pos, landing in jumps:
                new_captured = captured + (enemy_pos,)
                new_mask = mask | (1 << enemy_pos.index)
                deeper = Rules._search_chains(
                    board, landing, side, new_captured, new_mask, is_king
                )
                if deeper:
                    chains.extend(deeper)
                else:
                    chains.append(CaptureChain(landing, new_captured))

        return chains

    @staticmethod
    def _man_jumps(
        board: Board,
        pos: Position,
        side: Side,
        dr: int,
        dc: int,
        mask: int
    ) -> List[Tuple[Position, Position]]:
        """マンの1方向のジャンプ: 隣の敵駒を飛び越えて2マス先の空マスへ"""
        enemy_pos = pos.offset(dr, dc)
        landing = pos.offset(dr, dc, 2)

        if not board.is_valid_position(landing):
            return []
        if mask & (1 << enemy_pos.index):
            return []
        if Rules._is_enemy(board.get_cell(enemy_pos), side) and board.is_empty(landing):
            return [(enemy_pos, landing)]
        return []

    @staticmethod
    def _king_jumps(
        board: Board,
        pos: Position,
        side: Side,
        dr: int,
        dc: int,
        mask: int
    ) -> List[Tuple[Position, Position]]:
        """
        キングの1方向のジャンプ
        最初に出会う未取得の敵駒だけが対象。その先の空マスすべてが着地候補
        """
        jumps = []

        for dist in range(1, BOARD_SIZE):
            target = pos.offset(dr, dc, dist)
            if not board.is_valid_position(target):
                break

            cell = board.get_cell(target)
            if Rules.is_my_piece(cell, side):
                break
            # この連続ジャンプで既に取った駒は通過する
            if mask & (1 << target.index):
                continue
            if cell == Cell.EMPTY:
                continue

            for land_dist in range(dist + 1, BOARD_SIZE):
                landing = pos.offset(dr, dc, land_dist)
                if not board.is_valid_position(landing):
                    break
                if not board.is_empty(landing):
                    break
                jumps.append((target, landing))
            break

        return jumps
