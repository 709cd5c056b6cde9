"""
単体テスト: マス・手番・座標・手のテスト
"""

import pytest
from src.engine import Cell, Side, Position, Move, Rules


class TestSide:
    """手番のテストクラス"""

    def test_opponent(self):
        assert Side.WHITE.opponent == Side.BLACK
        assert Side.BLACK.opponent == Side.WHITE

    def test_forward_direction(self):
        """白は上（行が減る）、黒は下（行が増える）へ進む"""
        assert Side.WHITE.forward == -1
        assert Side.BLACK.forward == 1

    def test_promotion_row(self):
        assert Side.WHITE.promotion_row == 0
        assert Side.BLACK.promotion_row == 7


class TestCell:
    """マスのテストクラス"""

    def test_wire_codes(self):
        """整数コードは 0..4"""
        assert [int(cell) for cell in Cell] == [0, 1, 2, 3, 4]

    def test_owner(self):
        assert Cell.EMPTY.owner is None
        assert Cell.WHITE_MAN.owner == Side.WHITE
        assert Cell.WHITE_KING.owner == Side.WHITE
        assert Cell.BLACK_MAN.owner == Side.BLACK
        assert Cell.BLACK_KING.owner == Side.BLACK

    def test_is_king(self):
        assert Cell.WHITE_KING.is_king
        assert Cell.BLACK_KING.is_king
        assert not Cell.WHITE_MAN.is_king
        assert not Cell.EMPTY.is_king

    def test_promoted(self):
        assert Cell.WHITE_MAN.promoted() == Cell.WHITE_KING
        assert Cell.BLACK_MAN.promoted() == Cell.BLACK_KING
        assert Cell.BLACK_KING.promoted() == Cell.BLACK_KING
        assert Cell.EMPTY.promoted() == Cell.EMPTY

    @pytest.mark.parametrize("cell,side,expected", [
        (Cell.WHITE_MAN, Side.WHITE, True),
        (Cell.WHITE_KING, Side.WHITE, True),
        (Cell.BLACK_MAN, Side.WHITE, False),
        (Cell.BLACK_KING, Side.BLACK, True),
        (Cell.WHITE_KING, Side.BLACK, False),
        (Cell.EMPTY, Side.WHITE, False),
        (Cell.EMPTY, Side.BLACK, False),
    ])
    def test_is_my_piece(self, cell, side, expected):
        """所有の判定はマン・キングを区別しない"""
        assert Rules.is_my_piece(cell, side) == expected


class TestPosition:
    """座標のテストクラス"""

    def test_equals_plain_tuple(self):
        assert Position(5, 0) == (5, 0)
        assert hash(Position(5, 0)) == hash((5, 0))

    def test_index(self):
        assert Position(0, 0).index == 0
        assert Position(7, 7).index == 63
        assert Position(2, 3).index == 19

    def test_offset(self):
        assert Position(3, 3).offset(-1, -1) == (2, 2)
        assert Position(3, 3).offset(1, -1, 3) == (6, 0)

    def test_dict_round_trip(self):
        assert Position(4, 1).to_dict() == {"r": 4, "c": 1}
        assert Position.from_dict({"r": 4, "c": 1}) == (4, 1)


class TestMove:
    """手のテストクラス"""

    def test_normal_move(self):
        move = Move.create_normal_move((5, 0), (4, 1))

        assert not move.is_capture
        assert move.captured == ()
        assert move.from_pos == (5, 0)
        assert move.to_pos == (4, 1)

    def test_capture_move_keeps_order(self):
        move = Move.create_capture_move((5, 5), (1, 1), [(4, 4), (2, 2)])

        assert move.is_capture
        assert move.captured == ((4, 4), (2, 2))

    def test_value_equality(self):
        a = Move((3, 3), (1, 1), [(2, 2)])
        b = Move(Position(3, 3), Position(1, 1), [Position(2, 2)])

        assert a == b
        assert hash(a) == hash(b)
        assert a != Move((3, 3), (1, 1))

    def test_to_dict(self):
        move = Move((3, 3), (1, 1), [(2, 2)])

        assert move.to_dict() == {
            "from": {"r": 3, "c": 3},
            "to": {"r": 1, "c": 1},
            "captured": [{"r": 2, "c": 2}],
        }

    def test_from_dict_without_captures(self):
        move = Move.from_dict({"from": {"r": 5, "c": 0}, "to": {"r": 4, "c": 1}})

        assert move == Move((5, 0), (4, 1))

    def test_str(self):
        assert str(Move((5, 0), (4, 1))) == "(5, 0) -> (4, 1)"
        assert "x" in str(Move((3, 3), (1, 1), [(2, 2)]))
