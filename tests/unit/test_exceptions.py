"""
単体テスト: 例外クラスのテスト
"""

import pytest
from src.engine import (
    Move, CheckersError, InvalidBoardError, InvalidPositionError,
    IllegalMoveError, GameOverError,
)


class TestExceptions:
    """例外クラスのテストクラス"""

    def test_error_code_in_str(self):
        error = IllegalMoveError(Move((5, 0), (3, 2)), "合法手ではありません")

        assert error.error_code == "ILLEGAL_MOVE"
        assert str(error).startswith("[ILLEGAL_MOVE]")
        assert "(5, 0) -> (3, 2)" in str(error)
        assert error.reason == "合法手ではありません"

    def test_default_error_code_is_class_name(self):
        assert CheckersError("何か").error_code == "CheckersError"

    @pytest.mark.parametrize("error", [
        InvalidBoardError("形"),
        InvalidPositionError((9, 9)),
        IllegalMoveError(Move((0, 1), (1, 0))),
        GameOverError(),
    ])
    def test_all_derive_from_base(self, error):
        assert isinstance(error, CheckersError)

    def test_value_errors(self):
        assert isinstance(InvalidPositionError((9, 9)), ValueError)
        assert not isinstance(GameOverError(), ValueError)
        assert InvalidPositionError((9, 9)).position == (9, 9)
