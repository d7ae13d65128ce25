# standings.py
# League table and head-to-head records, recomputed from the full match list.

from typing import Dict, Iterable, List

from pydantic import BaseModel


class TeamStanding(BaseModel):
    rank: int = 0
    team: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_diff: int = 0
    points: int = 0


class Encounter(BaseModel):
    team: str
    opponent: str
    wins: int = 0
    losses: int = 0


def compute_standings(matches: Iterable, teams: Iterable[str]) -> List[TeamStanding]:
    """
    Fold the matches into the fixed team set and sort by
    points, then goal difference, then goals scored (all descending).
    Matches naming a team outside the set are skipped.
    """
    table: Dict[str, TeamStanding] = {name: TeamStanding(team=name) for name in teams}

    for match in matches:
        home = table.get(match.team1)
        away = table.get(match.team2)
        if home is None or away is None:
            continue

        home.played += 1
        away.played += 1
        home.goals_for += match.score1
        home.goals_against += match.score2
        away.goals_for += match.score2
        away.goals_against += match.score1

        if match.score1 > match.score2:
            home.won += 1
            away.lost += 1
        elif match.score1 < match.score2:
            away.won += 1
            home.lost += 1
        else:
            home.drawn += 1
            away.drawn += 1

    for row in table.values():
        row.goal_diff = row.goals_for - row.goals_against
        row.points = row.won * 3 + row.drawn

    ranked = sorted(
        table.values(),
        key=lambda x: (x.points, x.goal_diff, x.goals_for),
        reverse=True,
    )
    for idx, row in enumerate(ranked, start=1):
        row.rank = idx
    return ranked


def head_to_head(matches: Iterable) -> List[Encounter]:
    """Wins/losses of each team against each opponent it has met (draws not counted)."""
    results: Dict[str, Dict[str, Encounter]] = {}

    def pair(team: str, opponent: str) -> Encounter:
        row = results.setdefault(team, {})
        if opponent not in row:
            row[opponent] = Encounter(team=team, opponent=opponent)
        return row[opponent]

    for match in matches:
        first = pair(match.team1, match.team2)
        second = pair(match.team2, match.team1)
        if match.score1 > match.score2:
            first.wins += 1
            second.losses += 1
        elif match.score2 > match.score1:
            second.wins += 1
            first.losses += 1

    return [
        enc
        for opponents in results.values()
        for enc in opponents.values()
        if enc.wins > 0 or enc.losses > 0
    ]


def total_match_count(matches: Iterable) -> int:
    """Highest game number on record, or the number of matches if none is numbered."""
    matches = list(matches)
    numbers = [m.game_number for m in matches if m.game_number and m.game_number > 0]
    return max(numbers) if numbers else len(matches)
