"""
チェッカー FastAPI サーバ
対局の状態管理とAIの手のエンドポイントを提供
"""

import logging
import threading
import uuid
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..engine import GameState, Side, GameOverError, IllegalMoveError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="チェッカー API",
    description="ポートフォリオ用チェッカーのバックエンドAPI",
    version="1.0.0"
)

# CORS設定（フロントエンドからのアクセスを許可）
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class GameSession:
    """1局分のセッション（状態と、状態を変更するときのロック）"""

    def __init__(self, game_id: str, user_side: Side = Side.WHITE):
        self.game_id = game_id
        self.user_side = user_side
        self.state = GameState()
        # 同じ対局への手の適用・AI探索を直列化する
        self.lock = threading.Lock()

    @property
    def ai_side(self) -> Side:
        return self.user_side.opponent

    def to_dict(self) -> dict:
        """セッションを辞書形式に変換"""
        data = self.state.to_dict()
        data.update({
            "game_id": self.game_id,
            "user_side": self.user_side.name,
            "ai_side": self.ai_side.name,
            "game_over": self.state.is_over,
        })
        return data


# 対局を保持する辞書
games: Dict[str, GameSession] = {}


# Pydanticモデル（リクエスト/レスポンス用）

class NewGameRequest(BaseModel):
    user_side: str = "WHITE"  # WHITE, BLACK


class NewGameResponse(BaseModel):
    game_id: str
    message: str
    game_state: dict


class PositionModel(BaseModel):
    r: int = Field(ge=0, le=7)
    c: int = Field(ge=0, le=7)


class MoveRequest(BaseModel):
    from_row: int = Field(ge=0, le=7)
    from_col: int = Field(ge=0, le=7)
    to_row: int = Field(ge=0, le=7)
    to_col: int = Field(ge=0, le=7)
    captured: Optional[List[PositionModel]] = None  # 同じ着地点の連続ジャンプを区別する場合


class MoveResponse(BaseModel):
    success: bool
    message: str
    game_state: dict
    legal_moves: Optional[List[dict]] = None


class PredictRequest(BaseModel):
    difficulty: str = 'medium'  # easy, medium, hard
    apply: bool = True  # 選んだ手をそのまま盤面に適用するか


class PredictResponse(BaseModel):
    move: Optional[dict] = None
    evaluation: int
    game_state: dict
    ai_info: Optional[dict] = None


def _get_session(game_id: str) -> GameSession:
    if game_id not in games:
        raise HTTPException(status_code=404, detail="ゲームが見つかりません")
    return games[game_id]


# エンドポイント

@app.get("/api")
async def root():
    """APIルート"""
    return {
        "message": "チェッカー API へようこそ",
        "version": "1.0.0",
        "endpoints": [
            "/new_game",
            "/apply_move/{game_id}",
            "/predict/{game_id}",
            "/get_legal_moves/{game_id}",
            "/get_game/{game_id}",
            "/resign/{game_id}",
            "/delete_game/{game_id}",
            "/ai/status",
        ]
    }


@app.post("/new_game", response_model=NewGameResponse)
def new_game(request: Optional[NewGameRequest] = None):
    """
    新しいゲームを開始する
    白が先手。ユーザーが黒を選んだ場合は /predict でAIに初手を指させる
    """
    user_side_name = request.user_side.upper() if request else "WHITE"
    if user_side_name not in Side.__members__:
        raise HTTPException(status_code=400, detail=f"無効な手番: {user_side_name}")

    game_id = str(uuid.uuid4())
    session = GameSession(game_id, Side[user_side_name])
    games[game_id] = session
    logger.info("新しいゲーム: %s (user=%s)", game_id, user_side_name)

    return NewGameResponse(
        game_id=game_id,
        message="新しいゲームを開始しました",
        game_state=session.to_dict()
    )


@app.get("/get_game/{game_id}")
def get_game(game_id: str):
    """ゲームの状態を取得"""
    session = _get_session(game_id)
    with session.lock:
        return session.to_dict()


@app.post("/apply_move/{game_id}", response_model=MoveResponse)
def apply_move(game_id: str, move_request: MoveRequest):
    """
    手を適用する
    移動元と移動先（必要なら取る駒のリスト）から現在の合法手を探して指す
    """
    session = _get_session(game_id)

    with session.lock:
        state = session.state
        if state.is_over:
            raise HTTPException(status_code=400, detail="ゲームは既に終了しています")

        captured = None
        if move_request.captured is not None:
            captured = [(pos.r, pos.c) for pos in move_request.captured]

        move = state.find_move(
            (move_request.from_row, move_request.from_col),
            (move_request.to_row, move_request.to_col),
            captured
        )

        if move is None:
            logger.info("無効な手: %s (turn=%s)", move_request, state.turn.name)
            return MoveResponse(
                success=False,
                message="無効な手です",
                game_state=session.to_dict()
            )

        try:
            state.play(move)
        except (IllegalMoveError, GameOverError) as e:
            raise HTTPException(status_code=400, detail=str(e))

        logger.info("手を適用: %s %s", game_id, move)
        if state.is_over:
            logger.info("対局終了: %s 勝者=%s", game_id, state.winner.name)

        return MoveResponse(
            success=True,
            message="手を適用しました",
            game_state=session.to_dict(),
            legal_moves=[m.to_dict() for m in state.all_valid_moves()]
        )


@app.get("/get_legal_moves/{game_id}")
def get_legal_moves(game_id: str):
    """現在の手番の合法手を取得"""
    session = _get_session(game_id)

    with session.lock:
        state = session.state
        if state.is_over:
            return {"legal_moves": [], "message": "ゲームは終了しています"}

        legal_moves = state.all_valid_moves()
        return {
            "legal_moves": [move.to_dict() for move in legal_moves],
            "count": len(legal_moves),
            "current_player": state.turn.name,
            "must_capture": any(move.is_capture for move in legal_moves),
        }


@app.post("/predict/{game_id}", response_model=PredictResponse)
def predict(game_id: str, request: Optional[PredictRequest] = None):
    """
    AIが現在の手番の手を選ぶ
    探索はこのリクエストのワーカースレッドで最後まで実行される

    difficulty: 'easy', 'medium', 'hard'
    """
    from .ai_player import get_ai

    request = request or PredictRequest()
    session = _get_session(game_id)

    with session.lock:
        state = session.state
        if state.is_over:
            raise HTTPException(status_code=400, detail="ゲームは終了しています")

        ai = get_ai()
        side = state.turn
        best_move = ai.get_best_move(state.board, side, request.difficulty)

        ai_info = {
            "difficulty": request.difficulty,
            "depth": ai.depth_for(request.difficulty),
            "side": side.name,
        }

        if best_move is None:
            # 手が返らない場合は合法手がないものとして扱う
            logger.warning("AIが手を返しませんでした: %s (side=%s)", game_id, side.name)
            if request.apply:
                state.resign(side)
            return PredictResponse(
                move=None,
                evaluation=ai.evaluate_position(state.board, side),
                game_state=session.to_dict(),
                ai_info=ai_info
            )

        if request.apply:
            state.play(best_move)
            logger.info("AIの手を適用: %s %s", game_id, best_move)
            if state.is_over:
                logger.info("対局終了: %s 勝者=%s", game_id, state.winner.name)

        return PredictResponse(
            move=best_move.to_dict(),
            evaluation=ai.evaluate_position(state.board, side),
            game_state=session.to_dict(),
            ai_info=ai_info
        )


@app.post("/resign/{game_id}")
def resign(game_id: str):
    """
    投了する
    現在の手番が投了し、相手の勝利となる
    """
    session = _get_session(game_id)

    with session.lock:
        state = session.state
        if state.is_over:
            raise HTTPException(status_code=400, detail="ゲームは既に終了しています")

        loser = state.turn
        state.resign(loser)
        logger.info("投了: %s %s", game_id, loser.name)

        return {
            "message": f"{loser.name}が投了しました",
            "winner": state.winner.name,
            "game_state": session.to_dict()
        }


@app.delete("/delete_game/{game_id}")
def delete_game(game_id: str):
    """ゲームを削除"""
    if games.pop(game_id, None) is None:
        raise HTTPException(status_code=404, detail="ゲームが見つかりません")
    logger.info("ゲームを削除: %s", game_id)
    return {"message": "ゲームを削除しました"}


@app.get("/ai/status")
def get_ai_status():
    """AIの状態を取得"""
    from .ai_player import get_ai

    ai = get_ai()
    return {
        "status": "ready",
        "seed": ai.seed,
        "difficulty_levels": {
            name: settings['depth']
            for name, settings in ai.DIFFICULTY_SETTINGS.items()
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
