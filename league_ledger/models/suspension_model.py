# suspension_model.py
# Defines the PlayerSuspension table: one disciplinary record per (team, player).
# Ban counters count down only when the player's own team plays.

from enum import Enum
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class CardType(str, Enum):
    yellow = "yellow"
    red = "red"


class SuspensionCounters(SQLModel):
    """The three counters the card and settlement rules operate on."""
    # Yellows since the last reset. Not clamped: repeated yellows before a
    # settlement can push this past 3.
    active_yellows: int = Field(default=0, ge=0)

    # Remaining team matches to miss
    yellow_ban_left: int = Field(default=0, ge=0, le=1)
    red_ban_left: int = Field(default=0, ge=0, le=3)


class PlayerSuspension(SuspensionCounters, table=True):
    """Database model for a player's card/suspension ledger."""
    __tablename__ = "player_suspensions"
    __table_args__ = (UniqueConstraint("team", "player", name="uq_suspension_team_player"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    team: str = Field(index=True, min_length=1)
    player: str = Field(min_length=1)


# -------------------------------
# Pydantic schemas for API requests/responses
# -------------------------------
class SuspensionRead(SuspensionCounters):
    id: int
    team: str
    player: str


class SuspensionEdit(SQLModel):
    """Manual admin correction. Bounds follow the edit form: 0-3, 0-1, 0-3."""
    active_yellows: Optional[int] = Field(default=None, ge=0, le=3)
    yellow_ban_left: Optional[int] = Field(default=None, ge=0, le=1)
    red_ban_left: Optional[int] = Field(default=None, ge=0, le=3)


class CardCreate(SQLModel):
    team: str
    player: str
    card: CardType
