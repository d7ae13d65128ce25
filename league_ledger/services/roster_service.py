# roster_service.py
# Team rosters: the players a card can be given to.

import logging
from typing import Iterable, List, Optional

from league_ledger.core.errors import ValidationError
from league_ledger.core.store import PLAYERS, DocumentStore
from league_ledger.models import RosterPlayer
from league_ledger.services.validation import require_player, require_team

logger = logging.getLogger(__name__)


def add_player(store: DocumentStore, team: str, player: str, teams: Iterable[str]) -> RosterPlayer:
    team = require_team(team, teams)
    player = require_player(player)

    existing = store.find_one(PLAYERS, RosterPlayer.team == team, RosterPlayer.player == player)
    if existing is not None:
        raise ValidationError(f"{player} is already registered for {team}.")

    entry = store.create(PLAYERS, {"team": team, "player": player})
    logger.info("Added %s to %s", player, team)
    return entry


def list_players(store: DocumentStore, team: Optional[str] = None) -> List[RosterPlayer]:
    if team:
        return store.query(PLAYERS, RosterPlayer.team == team)
    return store.all(PLAYERS)


def delete_player(store: DocumentStore, player_id: int) -> None:
    store.delete(PLAYERS, player_id)
    logger.info("Deleted roster entry %s", player_id)
