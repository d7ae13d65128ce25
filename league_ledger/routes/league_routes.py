from typing import List

from fastapi import APIRouter, Depends

from league_ledger.services.standings import Encounter, TeamStanding
from league_ledger.services.views import LeagueViews, get_views

router = APIRouter()


# =========================================
# GET LEAGUE STANDINGS
# =========================================
@router.get("/standings", response_model=List[TeamStanding])
def get_standings(views: LeagueViews = Depends(get_views)):
    """Current table: points, then goal difference, then goals scored."""
    return views.standings


@router.get("/encounters", response_model=List[Encounter])
def get_encounters(views: LeagueViews = Depends(get_views)):
    return views.encounters


@router.get("/teams")
def get_teams(views: LeagueViews = Depends(get_views)):
    return {"teams": views.teams, "total_matches": views.total_matches}
