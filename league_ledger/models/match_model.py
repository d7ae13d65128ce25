# match_model.py
# Defines the Match model (a recorded fixture result) and its request/response schemas.

from datetime import date, datetime, timezone
from typing import List, Optional

from sqlmodel import SQLModel, Field

from league_ledger.models.suspension_model import SuspensionRead


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MatchBase(SQLModel):
    team1: str = Field(min_length=1)
    team2: str = Field(min_length=1)
    score1: int = Field(ge=0)
    score2: int = Field(ge=0)
    match_date: date


class Match(MatchBase, table=True):
    """
    A recorded result. Created once, never edited; only deleted.
    game_number is assigned as (stored matches + 1) at save time and is
    not renumbered when other matches are deleted.
    """
    __tablename__ = "matches"

    id: Optional[int] = Field(default=None, primary_key=True)
    game_number: int = Field(ge=1, index=True)
    saved_at: datetime = Field(default_factory=_utcnow)


class MatchCreate(MatchBase):
    pass


class MatchRead(MatchBase):
    id: int
    game_number: int
    saved_at: datetime


class MatchSaved(SQLModel):
    """
    Returned by the match-save step. The two team names are threaded into
    the card-entry step (cards are posted against match_id).
    """
    match_id: int
    game_number: int
    team1: str
    team2: str
    settled: List[SuspensionRead] = []
