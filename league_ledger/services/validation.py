# validation.py
# Input checks shared by the services. Every check here runs before any
# store call, so a failure has no side effects.

from typing import Iterable, Optional, Tuple

from league_ledger.core.errors import ValidationError


def clean_name(value: Optional[str]) -> str:
    return (value or "").strip()


def require_team(team: Optional[str], teams: Iterable[str]) -> str:
    team = clean_name(team)
    if not team:
        raise ValidationError("Please select a team.")
    if team not in teams:
        raise ValidationError(f"Unknown team: {team}")
    return team


def require_team_pair(team_a: Optional[str], team_b: Optional[str], teams: Iterable[str]) -> Tuple[str, str]:
    """Two known, different teams (a match or an eligibility check)."""
    teams = list(teams)
    if not clean_name(team_a) or not clean_name(team_b):
        raise ValidationError("Please select two different teams.")
    team_a = require_team(team_a, teams)
    team_b = require_team(team_b, teams)
    if team_a == team_b:
        raise ValidationError("Please select two different teams.")
    return team_a, team_b


def require_player(player: Optional[str]) -> str:
    player = clean_name(player)
    if not player:
        raise ValidationError("Please enter a player name.")
    return player
