"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

import numpy as np

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def empty_board():
    """空の盤面を提供するフィクスチャ"""
    from src.engine import Board
    return Board()


@pytest.fixture
def initial_board():
    """標準の初期配置の盤面を提供するフィクスチャ"""
    from src.engine import Board
    return Board.initial()


@pytest.fixture
def new_game():
    """初期状態の対局を提供するフィクスチャ"""
    from src.engine import GameState
    return GameState()


@pytest.fixture
def rng():
    """シード固定の乱数生成器"""
    return np.random.default_rng(1234)


@pytest.fixture
def white_side():
    from src.engine import Side
    return Side.WHITE


@pytest.fixture
def black_side():
    from src.engine import Side
    return Side.BLACK
