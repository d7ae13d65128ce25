from typing import List

from fastapi import APIRouter, Depends, Query

from league_ledger.core.auth import require_admin
from league_ledger.core.database import get_store, get_teams
from league_ledger.core.store import DocumentStore
from league_ledger.models import SuspensionEdit, SuspensionRead
from league_ledger.services.eligibility import EligibilityReport, check_match_eligibility
from league_ledger.services.suspension_service import delete_suspension, edit_suspension
from league_ledger.services.views import CardTableRow, LeagueViews, get_views

router = APIRouter()


@router.get("", response_model=List[CardTableRow])
def get_card_table(views: LeagueViews = Depends(get_views)):
    return views.card_table


@router.get("/eligibility", response_model=EligibilityReport)
def get_eligibility(
    team_a: str = Query(..., description="First team of the upcoming match"),
    team_b: str = Query(..., description="Second team of the upcoming match"),
    store: DocumentStore = Depends(get_store),
    teams: List[str] = Depends(get_teams),
):
    """Suspended and one-yellow-from-a-ban players for a match between team_a and team_b."""
    return check_match_eligibility(store, team_a, team_b, teams)


@router.patch("/{suspension_id}", response_model=SuspensionRead, dependencies=[Depends(require_admin)])
def update_suspension(suspension_id: int, payload: SuspensionEdit, store: DocumentStore = Depends(get_store)):
    return edit_suspension(store, suspension_id, payload)


@router.delete("/{suspension_id}", dependencies=[Depends(require_admin)])
def remove_suspension(suspension_id: int, store: DocumentStore = Depends(get_store)):
    delete_suspension(store, suspension_id)
    return {"message": f"Suspension record {suspension_id} deleted"}
