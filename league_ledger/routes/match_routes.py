from typing import List

from fastapi import APIRouter, Depends

from league_ledger.core.auth import require_admin
from league_ledger.core.database import get_store, get_teams
from league_ledger.core.store import DocumentStore
from league_ledger.models import CardCreate, MatchCreate, MatchRead, MatchSaved, SuspensionRead
from league_ledger.services.match_service import delete_match, match_teams, save_match
from league_ledger.services.suspension_service import record_card
from league_ledger.services.views import LeagueViews, get_views

router = APIRouter()


# =========================================
# SAVE MATCH (settles both teams' bans)
# =========================================
@router.post("", response_model=MatchSaved, status_code=201, dependencies=[Depends(require_admin)])
def create_match(
    payload: MatchCreate,
    store: DocumentStore = Depends(get_store),
    teams: List[str] = Depends(get_teams),
):
    """
    Save a result. The response carries match_id and both team names;
    cards from this match are then posted to /matches/{match_id}/cards.
    """
    return save_match(store, payload, teams)


# =========================================
# MATCH HISTORY
# =========================================
@router.get("", response_model=List[MatchRead])
def get_history(views: LeagueViews = Depends(get_views)):
    """All matches, newest first."""
    return views.history


@router.delete("/{match_id}", dependencies=[Depends(require_admin)])
def remove_match(match_id: int, store: DocumentStore = Depends(get_store)):
    delete_match(store, match_id)
    return {"message": f"Match {match_id} deleted"}


# =========================================
# CARDS FROM A SAVED MATCH
# =========================================
@router.post("/{match_id}/cards", response_model=SuspensionRead, dependencies=[Depends(require_admin)])
def add_card(match_id: int, payload: CardCreate, store: DocumentStore = Depends(get_store)):
    """Only players of the two teams in this match can be booked."""
    teams = match_teams(store, match_id)
    return record_card(store, teams, payload.team, payload.player, payload.card)
