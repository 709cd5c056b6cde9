"""
チェッカーエンジンの例外定義
"""


class CheckersError(Exception):
    """
    チェッカーエンジンの基底例外

    すべてのエンジン関連の例外はこのクラスを継承する。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class InvalidBoardError(CheckersError, ValueError):
    """盤面の形やマスの値が不正な場合"""

    def __init__(self, reason: str):
        super().__init__(f"不正な盤面: {reason}", "INVALID_BOARD")
        self.reason = reason


class InvalidPositionError(CheckersError, ValueError):
    """座標が盤面の範囲外の場合"""

    def __init__(self, position):
        super().__init__(f"盤面外の座標: {tuple(position)}", "INVALID_POSITION")
        self.position = position


class IllegalMoveError(CheckersError, ValueError):
    """適用できない手、または合法手でない手"""

    def __init__(self, move, reason: str = ""):
        message = f"不正な手: {move}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "ILLEGAL_MOVE")
        self.move = move
        self.reason = reason


class GameOverError(CheckersError):
    """終了したゲームに手を指そうとした場合"""

    def __init__(self, message: str = "ゲームは既に終了しています"):
        super().__init__(message, "GAME_OVER")
