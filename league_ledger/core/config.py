# config.py
# Module-level settings for the league ledger, read from the environment when set.

import os

# =====================================
# Global configuration for the league ledger
# =====================================

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# --- Database ---
DATABASE_URL = os.environ.get("LEAGUE_DATABASE_URL") or \
    "sqlite:///" + os.path.join(BASE_DIR, "league_ledger.db")
DATABASE_ECHO = os.environ.get("LEAGUE_DATABASE_ECHO", "").lower() in ("1", "true", "yes")

# --- Admin gate ---
# Placeholder password for admin actions (save/delete match, cards, roster edits).
# Not a security boundary.
ADMIN_PASSWORD = os.environ.get("LEAGUE_ADMIN_PASSWORD", "123321")

# --- League ---
DEFAULT_TEAMS = ["MANCHESTER CITY", "REAL MADRID", "BAYER MUNICH"]


def _parse_teams(raw):
    teams = [name.strip() for name in raw.split(",") if name.strip()]
    return teams or list(DEFAULT_TEAMS)


TEAMS = _parse_teams(os.environ.get("LEAGUE_TEAMS", ""))

# --- Logging ---
LOG_LEVEL = os.environ.get("LEAGUE_LOG_LEVEL", "INFO").upper()

# =========================================
# 🟨🟥 Card & Suspension Rules
# =========================================
YELLOW_BAN_THRESHOLD = 3   # active yellows that trigger a ban
YELLOW_BAN_MATCHES = 1     # team matches missed for yellow accumulation
RED_BAN_MATCHES = 3        # team matches missed for a red card (overwrites, never adds)
WARNING_YELLOWS = 2        # one more yellow = ban
