# league_ledger
# Match results, standings and the card/suspension ledger for a small football league.

__version__ = "0.1.0"
