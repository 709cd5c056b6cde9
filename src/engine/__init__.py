"""
チェッカーのゲームエンジン - パッケージ初期化
"""

from .piece import Cell, Side, Position
from .board import Board, BOARD_SIZE
from .move import Move
from .rules import Rules, CaptureChain
from .simulator import apply_move
from .game import GameState
from .exceptions import (
    CheckersError,
    InvalidBoardError,
    InvalidPositionError,
    IllegalMoveError,
    GameOverError,
)

__all__ = [
    'Cell',
    'Side',
    'Position',
    'Board',
    'BOARD_SIZE',
    'Move',
    'Rules',
    'CaptureChain',
    'apply_move',
    'GameState',
    'CheckersError',
    'InvalidBoardError',
    'InvalidPositionError',
    'IllegalMoveError',
    'GameOverError',
]
