"""Mini README: FastAPI interface for the Budget Jump mini-game.

Structure:
    * create_application - application factory wiring the game view, the
      ledger, and the JSON routes.

The presentation layer talks to the simulation by message passing: it posts
input events (start, jump, pause, resume, stop, play again) and reads a
state snapshot back each frame. Opening the game view starts the tick
source; closing it, or shutting the application down, stops it.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from .. import __version__
from ..configuration import BudgetJumpSettings, get_settings
from ..finance import GameLedger, JsonLedgerStore, LedgerPersistenceError
from ..game import ConfigurationError, GameEngine, GameSnapshot
from ..logging_utils import get_logger
from .game_view import GameView, GameViewClosedError

LOGGER = get_logger(__name__)


def _load_ledger(settings: BudgetJumpSettings) -> GameLedger:
    """Load the persisted ledger, keeping an unreadable file untouched."""

    store = JsonLedgerStore(settings.ledger_path)
    try:
        return GameLedger.from_store(store, badge_threshold=settings.badge_threshold)
    except LedgerPersistenceError:
        LOGGER.exception("Ledger file unreadable; scores from this session will not be saved")
        return GameLedger(badge_threshold=settings.badge_threshold)


def create_application(
    settings: Optional[BudgetJumpSettings] = None,
    ledger: Optional[GameLedger] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    ledger = ledger or _load_ledger(settings)
    view = GameView(tuning=settings.game_tuning(), ledger=ledger, seed=settings.random_seed)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        await view.close()

    app = FastAPI(title="Budget Jump", version=__version__, lifespan=lifespan)
    app.state.game_view = view
    app.state.ledger = ledger

    def _engine() -> GameEngine:
        try:
            return view.engine
        except GameViewClosedError as error:
            raise HTTPException(status_code=409, detail=str(error)) from error

    def _respond(snapshot: GameSnapshot) -> JSONResponse:
        payload = snapshot.as_dict()
        payload["ticking"] = view.ticking
        return JSONResponse(payload)

    def _command(action: Callable[[GameEngine], GameSnapshot]) -> JSONResponse:
        engine = _engine()
        try:
            snapshot = action(engine)
        except ConfigurationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return _respond(snapshot)

    @app.get("/")
    async def overview() -> JSONResponse:
        """Summarise the ledger and whether a game is running."""

        game = {
            "open": view.is_open,
            "state": view.engine.state.value if view.is_open else None,
            "ticking": view.ticking,
        }
        LOGGER.debug("Overview requested; game view open=%s", view.is_open)
        return JSONResponse({"game_view": game, "ledger": ledger.export_snapshot()})

    @app.post("/game/open")
    async def open_game() -> JSONResponse:
        try:
            engine = view.open()
        except ConfigurationError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return _respond(engine.snapshot())

    @app.post("/game/close")
    async def close_game() -> JSONResponse:
        await view.close()
        return JSONResponse({"open": False})

    @app.get("/game/snapshot")
    async def snapshot() -> JSONResponse:
        return _respond(_engine().snapshot())

    @app.post("/game/start")
    async def start_game() -> JSONResponse:
        return _command(lambda engine: engine.start_game())

    @app.post("/game/jump")
    async def jump() -> JSONResponse:
        return _command(lambda engine: engine.jump())

    @app.post("/game/pause")
    async def pause_game() -> JSONResponse:
        return _command(lambda engine: engine.pause_game())

    @app.post("/game/resume")
    async def resume_game() -> JSONResponse:
        return _command(lambda engine: engine.resume_game())

    @app.post("/game/stop")
    async def stop_game() -> JSONResponse:
        return _command(lambda engine: engine.stop_game())

    @app.post("/game/play-again")
    async def play_again() -> JSONResponse:
        return _command(lambda engine: engine.play_again())

    @app.post("/game/advance")
    async def advance(steps: int = Form(1, ge=1, le=10_000)) -> JSONResponse:
        """Step the simulation manually, for clients driving their own clock."""

        response = _command(lambda engine: engine.advance(steps))
        # A game over hands its score to a worker thread; wait for the ledger.
        await view.flush_reports()
        return response

    @app.get("/ledger/game-score")
    async def game_score() -> JSONResponse:
        return JSONResponse(ledger.record.as_dict())

    return app
