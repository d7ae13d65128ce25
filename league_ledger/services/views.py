# views.py
# Derived views kept current from the store's live feed.
#
# The builders are pure functions of a collection snapshot. LeagueViews owns
# the subscriptions and re-runs the builders whenever a collection changes.

import logging
from typing import Callable, Iterable, List, Literal

from fastapi import Request
from pydantic import BaseModel

from league_ledger.core.config import WARNING_YELLOWS
from league_ledger.core.store import MATCHES, SUSPENSIONS, DocumentStore
from league_ledger.models import MatchRead
from league_ledger.services.standings import (
    Encounter, TeamStanding, compute_standings, head_to_head, total_match_count
)

logger = logging.getLogger(__name__)


class CardTableRow(BaseModel):
    id: int
    team: str
    player: str
    active_yellows: int
    yellow_ban_left: int
    red_ban_left: int
    status: Literal["red_ban", "yellow_ban", "warning", "eligible"]
    matches_left: int


def card_status(record) -> str:
    if record.red_ban_left > 0:
        return "red_ban"
    if record.yellow_ban_left > 0:
        return "yellow_ban"
    if record.active_yellows == WARNING_YELLOWS:
        return "warning"
    return "eligible"


def build_card_table(records: Iterable) -> List[CardTableRow]:
    rows = []
    for record in records:
        status = card_status(record)
        if status == "red_ban":
            matches_left = record.red_ban_left
        elif status == "yellow_ban":
            matches_left = record.yellow_ban_left
        else:
            matches_left = 0
        rows.append(CardTableRow(
            id=record.id,
            team=record.team,
            player=record.player,
            active_yellows=record.active_yellows,
            yellow_ban_left=record.yellow_ban_left,
            red_ban_left=record.red_ban_left,
            status=status,
            matches_left=matches_left,
        ))
    return rows


def build_history(matches: Iterable) -> List[MatchRead]:
    """Newest first."""
    return [MatchRead.model_validate(m.model_dump()) for m in reversed(list(matches))]


class LeagueViews:
    """Standings, history, encounters and the card table, rebuilt on every change."""

    def __init__(self, teams: Iterable[str]):
        self.teams = list(teams)
        self.standings: List[TeamStanding] = compute_standings([], self.teams)
        self.history: List[MatchRead] = []
        self.encounters: List[Encounter] = []
        self.total_matches = 0
        self.card_table: List[CardTableRow] = []
        self._unsubscribe: List[Callable[[], None]] = []

    def attach(self, store: DocumentStore) -> None:
        self._unsubscribe.append(store.subscribe(MATCHES, self.on_matches))
        self._unsubscribe.append(store.subscribe(SUSPENSIONS, self.on_suspensions))

    def detach(self) -> None:
        while self._unsubscribe:
            self._unsubscribe.pop()()

    def on_matches(self, matches: list) -> None:
        self.standings = compute_standings(matches, self.teams)
        self.history = build_history(matches)
        self.encounters = head_to_head(matches)
        self.total_matches = total_match_count(matches)
        logger.debug("Match views rebuilt from %d match(es)", len(matches))

    def on_suspensions(self, records: list) -> None:
        self.card_table = build_card_table(records)
        logger.debug("Card table rebuilt from %d record(s)", len(records))


def get_views(request: Request) -> LeagueViews:
    return request.app.state.views
