import os

# Keep league_ledger.main's module-level app off the real database file.
os.environ.setdefault("LEAGUE_DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from league_ledger.core.database import build_engine, init_db
from league_ledger.core.store import PLAYERS, SUSPENSIONS, DocumentStore
from league_ledger.main import create_app

CITY = "MANCHESTER CITY"
MADRID = "REAL MADRID"
BAYERN = "BAYER MUNICH"
TEAMS = [CITY, MADRID, BAYERN]

ADMIN_PASSWORD = "letmein"
ADMIN = {"X-Admin-Password": ADMIN_PASSWORD}


@pytest.fixture
def store():
    store = DocumentStore(build_engine("sqlite://"))
    init_db(store.engine)
    yield store
    store.close()


@pytest.fixture
def client(store):
    app = create_app(store=store, admin_password=ADMIN_PASSWORD, teams=TEAMS)
    with TestClient(app) as test_client:
        yield test_client
    app.state.views.detach()


def make_suspension(store, team, player, active_yellows=0, yellow_ban_left=0, red_ban_left=0):
    return store.create(SUSPENSIONS, {
        "team": team,
        "player": player,
        "active_yellows": active_yellows,
        "yellow_ban_left": yellow_ban_left,
        "red_ban_left": red_ban_left,
    })


def register(store, team, player):
    return store.create(PLAYERS, {"team": team, "player": player})
