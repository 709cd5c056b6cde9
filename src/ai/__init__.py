"""
チェッカーAI 探索パッケージ
"""

from .search import evaluate, minimax, best_move, DEFAULT_SEARCH_DEPTH, PIECE_VALUES

__all__ = [
    'evaluate',
    'minimax',
    'best_move',
    'DEFAULT_SEARCH_DEPTH',
    'PIECE_VALUES',
]
