from datetime import date

import pytest

from league_ledger.core.errors import (
    RecordNotFound, StoreOperationFailed, StoreUnavailable, ValidationError
)
from league_ledger.core.store import MATCHES, PLAYERS, SUSPENSIONS
from league_ledger.models import PlayerSuspension

from tests.conftest import CITY, MADRID, make_suspension


def test_create_applies_defaults(store):
    rec = store.create(SUSPENSIONS, {"team": CITY, "player": "Haaland"})
    assert rec.id is not None
    assert (rec.active_yellows, rec.yellow_ban_left, rec.red_ban_left) == (0, 0, 0)


@pytest.mark.parametrize("data", [
    {"player": "Haaland"},
    {"team": CITY, "player": ""},
    {"team": CITY, "player": "Haaland", "red_ban_left": 4},
    {"team": CITY, "player": "Haaland", "yellow_ban_left": 2},
    {"team": CITY, "player": "Haaland", "active_yellows": -1},
])
def test_create_validates_schema(store, data):
    with pytest.raises(ValidationError):
        store.create(SUSPENSIONS, data)
    assert store.count(SUSPENSIONS) == 0


def test_active_yellows_is_not_capped_in_storage(store):
    rec = make_suspension(store, CITY, "Haaland", active_yellows=5, yellow_ban_left=1)
    assert store.get(SUSPENSIONS, rec.id).active_yellows == 5


def test_duplicate_team_player_pair_is_rejected(store):
    make_suspension(store, CITY, "Haaland")
    with pytest.raises(StoreOperationFailed):
        make_suspension(store, CITY, "Haaland")


def test_query_filters_and_keeps_insertion_order(store):
    a = make_suspension(store, CITY, "A")
    make_suspension(store, MADRID, "B")
    c = make_suspension(store, CITY, "C")

    found = store.query(SUSPENSIONS, PlayerSuspension.team == CITY)

    assert [r.id for r in found] == [a.id, c.id]
    assert store.find_one(SUSPENSIONS, PlayerSuspension.player == "Z") is None


def test_update_rejects_unknown_fields_and_bad_values(store):
    rec = make_suspension(store, CITY, "A")
    with pytest.raises(ValidationError):
        store.update(SUSPENSIONS, rec.id, {"goals": 3})
    with pytest.raises(ValidationError):
        store.update(SUSPENSIONS, rec.id, {"red_ban_left": 9})
    with pytest.raises(RecordNotFound):
        store.update(SUSPENSIONS, 12345, {"red_ban_left": 1})


def test_batch_update_is_all_or_nothing(store):
    a = make_suspension(store, CITY, "A", red_ban_left=3)
    b = make_suspension(store, CITY, "B", red_ban_left=3)

    with pytest.raises(RecordNotFound):
        store.batch_update(SUSPENSIONS, [(a.id, {"red_ban_left": 2}), (999, {"red_ban_left": 2})])
    with pytest.raises(ValidationError):
        store.batch_update(SUSPENSIONS, [(a.id, {"red_ban_left": 2}), (b.id, {"red_ban_left": 7})])

    assert store.get(SUSPENSIONS, a.id).red_ban_left == 3
    assert store.get(SUSPENSIONS, b.id).red_ban_left == 3


def test_empty_batch_is_a_no_op(store):
    feeds = []
    store.subscribe(SUSPENSIONS, feeds.append)
    assert store.batch_update(SUSPENSIONS, []) == []
    assert len(feeds) == 1


def test_batch_update_reports_success_when_the_feed_cannot_be_read(store, monkeypatch):
    rec = make_suspension(store, CITY, "A", red_ban_left=3)
    store.subscribe(SUSPENSIONS, lambda records: None)

    def unreachable(collection):
        raise StoreUnavailable("Could not reach the document store.")

    monkeypatch.setattr(store, "all", unreachable)

    updated = store.batch_update(SUSPENSIONS, [(rec.id, {"red_ban_left": 2})])

    assert [r.red_ban_left for r in updated] == [2]
    assert store.get(SUSPENSIONS, rec.id).red_ban_left == 2


def test_delete(store):
    rec = store.create(PLAYERS, {"team": CITY, "player": "Foden"})
    store.delete(PLAYERS, rec.id)
    assert store.get(PLAYERS, rec.id) is None
    with pytest.raises(RecordNotFound):
        store.delete(PLAYERS, rec.id)


def test_subscribe_receives_snapshot_and_every_change(store):
    feeds = []
    unsubscribe = store.subscribe(MATCHES, lambda matches: feeds.append([m.game_number for m in matches]))

    store.create(MATCHES, {
        "team1": CITY, "team2": MADRID, "score1": 1, "score2": 0,
        "match_date": date(2026, 10, 1), "game_number": 1,
    })
    unsubscribe()
    store.create(MATCHES, {
        "team1": MADRID, "team2": CITY, "score1": 0, "score2": 0,
        "match_date": date(2026, 10, 8), "game_number": 2,
    })

    assert feeds == [[], [1]]


def test_failing_subscriber_does_not_undo_the_write(store):
    def broken(records):
        if records:
            raise RuntimeError("render failed")

    store.subscribe(SUSPENSIONS, broken)
    rec = make_suspension(store, CITY, "A")

    assert store.get(SUSPENSIONS, rec.id) is not None


def test_unknown_collection(store):
    with pytest.raises(StoreOperationFailed):
        store.all("fixtures")


def test_closed_store_is_unavailable(store):
    store.close()
    with pytest.raises(StoreUnavailable):
        store.all(SUSPENSIONS)
