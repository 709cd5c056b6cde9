#!/usr/bin/env python
"""
チェッカー 開発サーバ起動スクリプト

環境変数:
    CHECKERS_HOST       待ち受けアドレス（既定: 0.0.0.0）
    CHECKERS_PORT       ポート（既定: 8000）
    CHECKERS_LOG_LEVEL  ログレベル（既定: INFO）
    CHECKERS_AI_SEED    AIの乱数シード（未設定なら毎回異なる）
"""

import sys
import os

# プロジェクトルートをパスに追加
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from src.api.main import app
from src.api.ai_player import reload_ai
from src.utils.logger import setup_logger
import uvicorn

if __name__ == "__main__":
    host = os.environ.get("CHECKERS_HOST", "0.0.0.0")
    port = int(os.environ.get("CHECKERS_PORT", "8000"))
    log_level = os.environ.get("CHECKERS_LOG_LEVEL", "INFO")
    seed = os.environ.get("CHECKERS_AI_SEED")

    logger = setup_logger("src", level=log_level)
    reload_ai(int(seed) if seed else None)

    logger.info("チェッカー 開発サーバを起動します")
    logger.info("APIサーバ: http://%s:%d", host, port)
    logger.info("API ドキュメント: http://%s:%d/docs", host, port)

    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=False,
        log_level=log_level.lower()
    )
