# match_service.py
# Saving and deleting match results.

import logging
from typing import Iterable, Tuple

from league_ledger.core.errors import RecordNotFound
from league_ledger.core.store import MATCHES, DocumentStore
from league_ledger.models import MatchCreate, MatchSaved, SuspensionRead
from league_ledger.services.suspension_service import settle_match
from league_ledger.services.validation import require_team_pair

logger = logging.getLogger(__name__)


def save_match(store: DocumentStore, payload: MatchCreate, teams: Iterable[str]) -> MatchSaved:
    """
    Store a result and settle both teams' bans for it.

    The game number is (stored matches + 1). If settlement fails after the
    match document was written, the document is removed again so match
    history and ban counts stay in step, and the error is re-raised.
    """
    team1, team2 = require_team_pair(payload.team1, payload.team2, teams)

    data = payload.model_dump()
    data.update(team1=team1, team2=team2, game_number=store.count(MATCHES) + 1)
    match = store.create(MATCHES, data)

    try:
        settled = settle_match(store, team1, team2)
    except Exception:
        logger.error("Settlement failed for match #%s; removing the match record", match.game_number)
        try:
            store.delete(MATCHES, match.id)
        except Exception:
            logger.exception("Could not remove match #%s after the failed settlement", match.game_number)
        raise

    logger.info("✅ Match #%s saved: %s %d-%d %s",
                match.game_number, team1, match.score1, match.score2, team2)
    return MatchSaved(
        match_id=match.id,
        game_number=match.game_number,
        team1=team1,
        team2=team2,
        settled=[SuspensionRead.model_validate(r.model_dump()) for r in settled],
    )


def match_teams(store: DocumentStore, match_id: int) -> Tuple[str, str]:
    """The two teams of a saved match (used to scope card entry)."""
    match = store.get(MATCHES, match_id)
    if match is None:
        raise RecordNotFound(f"Match {match_id} not found.")
    return match.team1, match.team2


def delete_match(store: DocumentStore, match_id: int) -> None:
    # Bans already settled for this match are left as they are.
    store.delete(MATCHES, match_id)
    logger.info("Deleted match %s", match_id)
