# player_model.py
# Team roster entries. Cards can only be given to players on their team's roster.

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import SQLModel, Field


class RosterPlayer(SQLModel, table=True):
    __tablename__ = "players"

    id: Optional[int] = Field(default=None, primary_key=True)
    team: str = Field(index=True, min_length=1)
    player: str = Field(min_length=1)
    added_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PlayerCreate(SQLModel):
    team: str
    player: str
