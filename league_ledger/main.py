import logging
from typing import Iterable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from league_ledger.core.auth import hash_admin_password
from league_ledger.core.config import ADMIN_PASSWORD, LOG_LEVEL, TEAMS
from league_ledger.core.database import build_engine, init_db
from league_ledger.core.errors import LeagueError
from league_ledger.core.store import DocumentStore, describe_validation_error
from league_ledger.services.views import LeagueViews

# --- Routers ---
from league_ledger.routes.match_routes import router as match_router
from league_ledger.routes.suspension_routes import router as suspension_router
from league_ledger.routes.player_routes import router as player_router
from league_ledger.routes.league_routes import router as league_router

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[DocumentStore] = None,
    admin_password: str = ADMIN_PASSWORD,
    teams: Optional[Iterable[str]] = None,
) -> FastAPI:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1️⃣ Store + tables
    if store is None:
        store = DocumentStore(build_engine())
    init_db(store.engine)

    app = FastAPI(title="League Ledger")
    app.state.store = store
    app.state.teams = list(teams or TEAMS)
    app.state.admin_password_hash = hash_admin_password(admin_password)

    # 2️⃣ Live views: rebuilt on every change to matches / suspensions
    views = LeagueViews(app.state.teams)
    views.attach(store)
    app.state.views = views

    # 3️⃣ Domain errors -> HTTP
    @app.exception_handler(LeagueError)
    async def league_error_handler(request: Request, exc: LeagueError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    # Request-schema failures -> 400 with a flat detail, like ValidationError
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": describe_validation_error(exc)})

    # Routers
    app.include_router(match_router, prefix="/matches", tags=["Matches"])
    app.include_router(suspension_router, prefix="/suspensions", tags=["Suspensions"])
    app.include_router(player_router, prefix="/players", tags=["Players"])
    app.include_router(league_router, prefix="/league", tags=["League"])

    logger.info("League ledger ready for %s", ", ".join(app.state.teams))
    return app


app = create_app()
