# suspension_service.py
# Card and settlement rules for the suspension ledger.
#
# Bans count the player's OWN team's matches: a Bayer Munich vs Real Madrid
# match never reduces a Manchester City player's ban. Every saved match runs
# settle_match(team1, team2) once, and only those two teams' records move.
#
# apply_card / settle_counters are pure; the rest reads and writes the store.

import logging
from typing import List, Optional, Tuple, Union

from league_ledger.core.config import (
    RED_BAN_MATCHES, YELLOW_BAN_MATCHES, YELLOW_BAN_THRESHOLD
)
from league_ledger.core.errors import ValidationError
from league_ledger.core.store import PLAYERS, SUSPENSIONS, DocumentStore
from league_ledger.models import (
    CardType, PlayerSuspension, RosterPlayer, SuspensionCounters, SuspensionEdit
)
from league_ledger.services.validation import require_player

logger = logging.getLogger(__name__)


# =========================================
# 🟨🟥 Card Event Processor
# =========================================
def apply_card(record: SuspensionCounters, card: CardType) -> SuspensionCounters:
    """
    Return the counters after one card.

    Yellow: one more active yellow; reaching the threshold sets the yellow
    ban to 1 match (it never accumulates past 1).
    Red: red ban set to 3 matches, overwriting any existing red ban, and
    the yellow state is wiped.
    """
    active_yellows = record.active_yellows
    yellow_ban_left = record.yellow_ban_left
    red_ban_left = record.red_ban_left

    if card == CardType.yellow:
        active_yellows += 1
        if active_yellows >= YELLOW_BAN_THRESHOLD:
            yellow_ban_left = YELLOW_BAN_MATCHES
    elif card == CardType.red:
        red_ban_left = RED_BAN_MATCHES
        active_yellows = 0
        yellow_ban_left = 0
    else:
        raise ValueError(f"Unsupported card type: {card!r}")

    return SuspensionCounters(
        active_yellows=active_yellows,
        yellow_ban_left=yellow_ban_left,
        red_ban_left=red_ban_left,
    )


# =========================================
# Match Settlement Processor
# =========================================
def settle_counters(record: SuspensionCounters) -> Optional[SuspensionCounters]:
    """
    Counters after the player's team plays one match, or None when the
    player has no pending ban. Only one ban moves per match, red first.
    A ban reaching 0 clears the active yellows.
    """
    active_yellows = record.active_yellows
    yellow_ban_left = record.yellow_ban_left
    red_ban_left = record.red_ban_left

    if red_ban_left > 0:
        red_ban_left -= 1
        if red_ban_left == 0:
            active_yellows = 0
    elif yellow_ban_left > 0:
        yellow_ban_left -= 1
        if yellow_ban_left == 0:
            active_yellows = 0
    else:
        return None

    return SuspensionCounters(
        active_yellows=active_yellows,
        yellow_ban_left=yellow_ban_left,
        red_ban_left=red_ban_left,
    )


def settle_match(store: DocumentStore, team1: str, team2: str) -> List[PlayerSuspension]:
    """
    Count one match off every pending ban of team1 and team2 players.
    All changes go out as a single batch; no pending bans means no write.
    """
    records = store.query(SUSPENSIONS, PlayerSuspension.team.in_([team1, team2]))

    changes = []
    for record in records:
        settled = settle_counters(record)
        if settled is not None:
            changes.append((record.id, settled.model_dump()))

    updated = store.batch_update(SUSPENSIONS, changes)
    logger.info("Settled %s vs %s: %d suspension record(s) updated", team1, team2, len(updated))
    return updated


# ---------------------------------------------
# Helper: get or create a player's record
# ---------------------------------------------
def get_or_create_suspension(store: DocumentStore, team: str, player: str) -> PlayerSuspension:
    """Lookup by (team, player); a miss creates a zeroed record."""
    existing = store.find_one(
        SUSPENSIONS,
        PlayerSuspension.team == team,
        PlayerSuspension.player == player,
    )
    if existing is not None:
        return existing
    return store.create(SUSPENSIONS, {"team": team, "player": player})


def record_card(
    store: DocumentStore,
    match_teams: Tuple[str, str],
    team: str,
    player: str,
    card: Union[CardType, str],
) -> PlayerSuspension:
    """
    Apply a card from a saved match to a player of one of its two teams.
    match_teams comes from the saved match, not from ambient state.
    """
    team = (team or "").strip()
    player = require_player(player)
    if not team:
        raise ValidationError("Please select team and player.")
    try:
        card = CardType(card)
    except ValueError:
        raise ValidationError("Please select Yellow Card or Red Card.") from None

    team1, team2 = match_teams
    if team not in (team1, team2):
        raise ValidationError(f"Can only add cards for {team1} or {team2} players in this match.")

    on_roster = store.find_one(PLAYERS, RosterPlayer.team == team, RosterPlayer.player == player)
    if on_roster is None:
        raise ValidationError(f"{player} is not registered for {team}.")

    record = get_or_create_suspension(store, team, player)
    counters = apply_card(record, card)
    updated = store.update(SUSPENSIONS, record.id, counters.model_dump())

    if card == CardType.red:
        logger.info("🟥 Red card: %s (%s) banned for the next %d %s matches",
                    player, team, updated.red_ban_left, team)
    else:
        logger.info("🟨 Yellow card: %s (%s) now on %d", player, team, updated.active_yellows)
    return updated


# ---------------------------------------------
# Admin corrections
# ---------------------------------------------
def edit_suspension(store: DocumentStore, suspension_id: int, edit: SuspensionEdit) -> PlayerSuspension:
    changes = edit.model_dump(exclude_none=True)
    if not changes:
        raise ValidationError("Nothing to update.")
    return store.update(SUSPENSIONS, suspension_id, changes)


def delete_suspension(store: DocumentStore, suspension_id: int) -> None:
    store.delete(SUSPENSIONS, suspension_id)
    logger.info("Deleted suspension record %s", suspension_id)
