"""
ログ設定

サーバ起動時に setup_logger を一度呼ぶ。各モジュールは logging.getLogger(__name__) を使う。
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str = 'src',
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: str = 'logs',
    max_size: int = 10,  # MB
    backup_count: int = 5,
    console_output: bool = True
) -> logging.Logger:
    """
    ロガーを設定する

    Args:
        name: ロガー名（パッケージ名にすると配下のモジュールすべてに効く）
        level: ログレベル
        log_file: ログファイル名（Noneならファイル出力なし）
        log_dir: ログディレクトリ
        max_size: ログファイルの最大サイズ(MB)
        backup_count: ローテーションで残すファイル数
        console_output: 標準出力に出すか

    Returns:
        設定済みのロガー
    """
    logger = logging.getLogger(name)

    # 設定済みならそのまま返す
    if logger.handlers:
        return logger

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / log_file,
            maxBytes=max_size * 1024 * 1024,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = 'src') -> logging.Logger:
    """ロガーを取得"""
    return logging.getLogger(name)
