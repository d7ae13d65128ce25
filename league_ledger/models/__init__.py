# league_ledger/models/__init__.py
# Centralized imports for all database models and schemas

# Suspensions
from .suspension_model import (
    CardType, SuspensionCounters, PlayerSuspension, SuspensionRead, SuspensionEdit, CardCreate
)

# Matches
from .match_model import Match, MatchCreate, MatchRead, MatchSaved

# Roster
from .player_model import RosterPlayer, PlayerCreate
