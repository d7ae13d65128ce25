import pytest

from league_ledger.core.errors import ValidationError
from league_ledger.services.eligibility import check_eligibility, check_match_eligibility

from tests.conftest import BAYERN, CITY, MADRID, TEAMS, make_suspension


def test_eligibility_scenario(store):
    make_suspension(store, CITY, "Q", red_ban_left=2)
    make_suspension(store, MADRID, "R", active_yellows=2)
    make_suspension(store, BAYERN, "Kane", red_ban_left=3)
    make_suspension(store, BAYERN, "Musiala", active_yellows=2)

    report = check_match_eligibility(store, CITY, MADRID, TEAMS)

    assert [(s.player, s.kind, s.matches_left) for s in report.suspended] == [("Q", "red", 2)]
    assert [w.player for w in report.warned] == ["R"]
    assert report.all_eligible is False


def test_classification_first_rule_wins(store):
    make_suspension(store, CITY, "Both", active_yellows=3, yellow_ban_left=1, red_ban_left=1)
    make_suspension(store, CITY, "Yellow", active_yellows=3, yellow_ban_left=1)
    make_suspension(store, MADRID, "RedAndTwo", active_yellows=2, red_ban_left=3)
    make_suspension(store, MADRID, "One", active_yellows=1)
    make_suspension(store, MADRID, "Zero")
    make_suspension(store, CITY, "Four", active_yellows=4)

    report = check_eligibility(store.all("playerSuspensions"), CITY, MADRID)

    assert [(s.player, s.kind) for s in report.suspended] == [
        ("Both", "red"), ("Yellow", "yellow"), ("RedAndTwo", "red"),
    ]
    assert report.warned == []


def test_all_eligible_when_nothing_to_report(store):
    make_suspension(store, CITY, "Foden", active_yellows=1)

    report = check_match_eligibility(store, CITY, BAYERN, TEAMS)

    assert report.all_eligible is True
    assert report.model_dump()["all_eligible"] is True


@pytest.mark.parametrize("team_a,team_b", [(CITY, CITY), ("", MADRID), (CITY, "ARSENAL")])
def test_invalid_team_pairs_rejected(store, team_a, team_b):
    with pytest.raises(ValidationError):
        check_match_eligibility(store, team_a, team_b, TEAMS)
