from typing import List, Optional

from fastapi import APIRouter, Depends

from league_ledger.core.auth import require_admin
from league_ledger.core.database import get_store, get_teams
from league_ledger.core.store import DocumentStore
from league_ledger.models import PlayerCreate, RosterPlayer
from league_ledger.services.roster_service import add_player, delete_player, list_players

router = APIRouter()


@router.get("", response_model=List[RosterPlayer])
def get_players(team: Optional[str] = None, store: DocumentStore = Depends(get_store)):
    return list_players(store, team)


@router.post("", response_model=RosterPlayer, status_code=201, dependencies=[Depends(require_admin)])
def create_player(
    payload: PlayerCreate,
    store: DocumentStore = Depends(get_store),
    teams: List[str] = Depends(get_teams),
):
    return add_player(store, payload.team, payload.player, teams)


@router.delete("/{player_id}", dependencies=[Depends(require_admin)])
def remove_player(player_id: int, store: DocumentStore = Depends(get_store)):
    delete_player(store, player_id)
    return {"message": f"Player {player_id} deleted"}
