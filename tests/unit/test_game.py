"""
単体テスト: 対局状態（GameState）のテスト
手番の交代、得点、勝敗判定を確認
"""

import pytest
from src.engine import (
    Board, Cell, Side, Move, GameState,
    IllegalMoveError, GameOverError,
)


def make_board(pieces):
    board = Board()
    for pos, cell in pieces.items():
        board.set_cell(pos, cell)
    return board


class TestGameState:
    """対局状態のテストクラス"""

    def test_new_game(self, new_game):
        """新しい対局は白番・得点0・勝者なし"""
        assert new_game.turn == Side.WHITE
        assert new_game.scores == {Side.WHITE: 0, Side.BLACK: 0}
        assert new_game.winner is None
        assert not new_game.is_over
        assert len(new_game.all_valid_moves()) == 7

    def test_play_switches_turn(self, new_game):
        move = new_game.find_move((5, 0), (4, 1))

        new_game.play(move)

        assert new_game.turn == Side.BLACK
        assert new_game.board.get_cell((4, 1)) == Cell.WHITE_MAN
        assert new_game.move_history == [move]
        assert set(new_game.valid_moves.keys()) == {(2, 1), (2, 3), (2, 5), (2, 7)}

    def test_find_move_returns_none_for_illegal(self, new_game):
        assert new_game.find_move((5, 0), (3, 2)) is None
        assert new_game.find_move((2, 1), (3, 0)) is None

    def test_find_move_distinguishes_by_captured(self):
        """同じ着地点でも取る駒の列で手を選べる"""
        board = make_board({
            (6, 3): Cell.WHITE_MAN,
            (5, 2): Cell.BLACK_MAN,
            (3, 2): Cell.BLACK_MAN,
            (0, 7): Cell.BLACK_MAN,
        })
        game = GameState(board)

        move = game.find_move((6, 3), (2, 3), [(5, 2), (3, 2)])

        assert move == Move((6, 3), (2, 3), [(5, 2), (3, 2)])
        assert game.find_move((6, 3), (2, 3), [(3, 2)]) is None

    def test_illegal_move_rejected(self, new_game):
        with pytest.raises(IllegalMoveError):
            new_game.play(Move((5, 0), (3, 2)))

        assert new_game.turn == Side.WHITE
        assert new_game.move_history == []

    def test_capture_counts_for_mover(self):
        """取った駒の数が指した側の得点になる"""
        board = make_board({
            (5, 5): Cell.WHITE_MAN,
            (4, 4): Cell.BLACK_MAN,
            (2, 2): Cell.BLACK_MAN,
            (0, 7): Cell.BLACK_MAN,
        })
        game = GameState(board)

        game.play(Move((5, 5), (1, 1), [(4, 4), (2, 2)]))

        assert game.scores == {Side.WHITE: 2, Side.BLACK: 0}
        assert game.board.count(Cell.BLACK_MAN) == 1

    def test_side_without_moves_loses(self):
        """最後の駒を取られた側は負け"""
        board = make_board({
            (3, 3): Cell.WHITE_MAN,
            (2, 2): Cell.BLACK_MAN,
        })
        game = GameState(board)

        game.play(Move((3, 3), (1, 1), [(2, 2)]))

        assert game.is_over
        assert game.winner == Side.WHITE
        assert game.valid_moves == {}

    def test_blocked_side_loses_at_start(self):
        """開始時点で合法手がなければその場で終了"""
        board = make_board({
            (7, 0): Cell.WHITE_MAN,
            (6, 1): Cell.BLACK_MAN,
            (5, 2): Cell.BLACK_MAN,
        })

        game = GameState(board)

        assert game.winner == Side.BLACK

    def test_play_after_game_over(self):
        board = make_board({(0, 1): Cell.BLACK_MAN})
        game = GameState(board)

        with pytest.raises(GameOverError):
            game.play(Move((0, 1), (1, 0)))

    def test_resign(self, new_game):
        new_game.resign(Side.WHITE)

        assert new_game.winner == Side.BLACK
        assert new_game.all_valid_moves() == []
        with pytest.raises(GameOverError):
            new_game.resign(Side.BLACK)

    def test_to_dict(self, new_game):
        data = new_game.to_dict()

        assert data["turn"] == "WHITE"
        assert data["winner"] is None
        assert data["scores"] == {"WHITE": 0, "BLACK": 0}
        assert data["board"] == new_game.board.to_list()
        assert set(data["valid_moves"].keys()) == {"5,0", "5,2", "5,4", "5,6"}
        assert data["valid_moves"]["5,0"] == [
            {"from": {"r": 5, "c": 0}, "to": {"r": 4, "c": 1}, "captured": []}
        ]
        assert data["move_count"] == 0
        assert data["move_history"] == []

    def test_from_dict_restores_state(self, new_game):
        new_game.play(new_game.find_move((5, 2), (4, 3)))
        new_game.scores[Side.WHITE] = 3

        restored = GameState.from_dict(new_game.to_dict())

        assert restored.board == new_game.board
        assert restored.turn == Side.BLACK
        assert restored.scores[Side.WHITE] == 3
        assert restored.valid_moves == new_game.valid_moves

    def test_round_trip_after_several_moves(self, new_game):
        """数手進めた状態も辞書経由で同じ状態に戻る"""
        for from_pos, to_pos in [((5, 2), (4, 3)), ((2, 5), (3, 4))]:
            new_game.play(new_game.find_move(from_pos, to_pos))
        new_game.play(new_game.all_valid_moves()[0])

        data = new_game.to_dict()
        restored = GameState.from_dict(data)

        assert restored.to_dict() == data
        assert restored.move_history == new_game.move_history
        assert data["move_count"] == 3
        assert data["move_history"][2]["captured"] == [{"r": 3, "c": 4}]

    def test_from_dict_keeps_winner(self, new_game):
        new_game.resign(Side.BLACK)

        restored = GameState.from_dict(new_game.to_dict())

        assert restored.winner == Side.WHITE
        assert restored.valid_moves == {}
