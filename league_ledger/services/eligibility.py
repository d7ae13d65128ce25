# eligibility.py
# Who can play in an upcoming match between two teams.

from typing import Iterable, List, Literal

from pydantic import BaseModel, computed_field

from league_ledger.core.config import WARNING_YELLOWS
from league_ledger.core.store import SUSPENSIONS, DocumentStore
from league_ledger.services.validation import require_team_pair


class SuspendedPlayer(BaseModel):
    team: str
    player: str
    kind: Literal["red", "yellow"]
    matches_left: int


class WarnedPlayer(BaseModel):
    team: str
    player: str
    active_yellows: int


class EligibilityReport(BaseModel):
    team_a: str
    team_b: str
    suspended: List[SuspendedPlayer] = []
    warned: List[WarnedPlayer] = []

    @computed_field
    @property
    def all_eligible(self) -> bool:
        return not self.suspended and not self.warned


def check_eligibility(records: Iterable, team_a: str, team_b: str) -> EligibilityReport:
    """
    Classify the two teams' records, first rule wins:
    red ban -> suspended (red), yellow ban -> suspended (yellow),
    exactly two active yellows -> warned, anything else -> left out.
    Scan order is kept within each group.
    """
    report = EligibilityReport(team_a=team_a, team_b=team_b)
    for record in records:
        if record.team not in (team_a, team_b):
            continue
        if record.red_ban_left > 0:
            report.suspended.append(SuspendedPlayer(
                team=record.team, player=record.player, kind="red",
                matches_left=record.red_ban_left,
            ))
        elif record.yellow_ban_left > 0:
            report.suspended.append(SuspendedPlayer(
                team=record.team, player=record.player, kind="yellow",
                matches_left=record.yellow_ban_left,
            ))
        elif record.active_yellows == WARNING_YELLOWS:
            report.warned.append(WarnedPlayer(
                team=record.team, player=record.player,
                active_yellows=record.active_yellows,
            ))
    return report


def check_match_eligibility(store: DocumentStore, team_a: str, team_b: str, teams: Iterable[str]) -> EligibilityReport:
    team_a, team_b = require_team_pair(team_a, team_b, teams)
    return check_eligibility(store.all(SUSPENSIONS), team_a, team_b)
