# store.py
# Document-store abstraction over SQLModel tables.
#
# Collections are addressed by name (playerSuspensions, matches, players) and
# keyed by integer id. Every create/update is validated against the table's
# schema before it reaches the database. batch_update commits in a single
# transaction: either every change lands or none does.
#
# subscribe() gives a live feed: the callback receives the full collection
# immediately and again after every committed change to it.

import logging
from collections import defaultdict
from contextlib import contextmanager
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from league_ledger.core.errors import (
    LeagueError, RecordNotFound, StoreOperationFailed, StoreUnavailable, ValidationError
)
from league_ledger.models import Match, PlayerSuspension, RosterPlayer

logger = logging.getLogger(__name__)

SUSPENSIONS = "playerSuspensions"
MATCHES = "matches"
PLAYERS = "players"

COLLECTIONS = {
    SUSPENSIONS: PlayerSuspension,
    MATCHES: Match,
    PLAYERS: RosterPlayer,
}

Subscriber = Callable[[List[SQLModel]], Any]


def describe_validation_error(exc) -> str:
    """Flatten pydantic (or FastAPI request) validation errors into one readable line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "record"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


class DocumentStore:
    def __init__(self, engine):
        self.engine = engine
        self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)
        self._closed = False

    # ---------------------------------------------
    # Session / error translation
    # ---------------------------------------------
    @contextmanager
    def session(self):
        """
        Yield a session. SQLAlchemy failures are translated:
        OperationalError -> StoreUnavailable, anything else -> StoreOperationFailed.
        Leaving the block without commit rolls back.
        """
        if self._closed:
            raise StoreUnavailable("Document store is not connected.")
        try:
            with Session(self.engine, expire_on_commit=False) as session:
                yield session
        except OperationalError as exc:
            logger.error("Document store unavailable: %s", exc)
            raise StoreUnavailable("Could not reach the document store.") from exc
        except SQLAlchemyError as exc:
            logger.error("Document store operation failed: %s", exc)
            raise StoreOperationFailed("The document store rejected the operation.") from exc

    def close(self) -> None:
        self._closed = True
        self.engine.dispose()

    @staticmethod
    def model_for(collection: str):
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise StoreOperationFailed(f"Unknown collection: {collection}") from None

    # ---------------------------------------------
    # Validation at the store boundary
    # ---------------------------------------------
    @staticmethod
    def _validate(model, data: Mapping[str, Any]):
        try:
            return model.model_validate(dict(data))
        except PydanticValidationError as exc:
            raise ValidationError(describe_validation_error(exc)) from exc

    def _check_changes(self, model, record, changes: Mapping[str, Any]) -> None:
        unknown = [name for name in changes if name not in model.model_fields or name == "id"]
        if unknown:
            raise ValidationError(f"Unknown or read-only fields: {', '.join(sorted(unknown))}")
        merged = record.model_dump()
        merged.update(changes)
        self._validate(model, merged)

    # ---------------------------------------------
    # Reads
    # ---------------------------------------------
    def get(self, collection: str, key: int):
        model = self.model_for(collection)
        with self.session() as session:
            return session.get(model, key)

    def query(self, collection: str, *conditions) -> list:
        """Return every record matching all conditions, in insertion (id) order."""
        model = self.model_for(collection)
        statement = select(model)
        if conditions:
            statement = statement.where(*conditions)
        statement = statement.order_by(model.id)
        with self.session() as session:
            return list(session.exec(statement).all())

    def find_one(self, collection: str, *conditions):
        records = self.query(collection, *conditions)
        return records[0] if records else None

    def all(self, collection: str) -> list:
        return self.query(collection)

    def count(self, collection: str) -> int:
        model = self.model_for(collection)
        with self.session() as session:
            return session.exec(select(func.count()).select_from(model)).one()

    # ---------------------------------------------
    # Writes
    # ---------------------------------------------
    def create(self, collection: str, data: Mapping[str, Any]):
        model = self.model_for(collection)
        record = self._validate(model, data)
        with self.session() as session:
            session.add(record)
            session.commit()
        self._notify(collection)
        return record

    def update(self, collection: str, key: int, changes: Mapping[str, Any]):
        return self.batch_update(collection, [(key, changes)])[0]

    def batch_update(self, collection: str, changes: Sequence[Tuple[int, Mapping[str, Any]]]) -> list:
        """
        Apply every (key, changes) pair in one transaction.
        A missing key or invalid change aborts the whole batch.
        An empty batch issues no write and no notification.
        """
        if not changes:
            return []
        model = self.model_for(collection)
        with self.session() as session:
            records = []
            for key, fields in changes:
                record = session.get(model, key)
                if record is None:
                    raise RecordNotFound(f"No {collection} record with id {key}.")
                self._check_changes(model, record, fields)
                for name, value in fields.items():
                    setattr(record, name, value)
                session.add(record)
                records.append(record)
            session.commit()
        # expire_on_commit=False keeps the committed values on the instances;
        # nothing after this point may turn a committed write into a failure
        self._notify(collection)
        return records

    def delete(self, collection: str, key: int) -> None:
        model = self.model_for(collection)
        with self.session() as session:
            record = session.get(model, key)
            if record is None:
                raise RecordNotFound(f"No {collection} record with id {key}.")
            session.delete(record)
            session.commit()
        self._notify(collection)

    # ---------------------------------------------
    # Live feed
    # ---------------------------------------------
    def subscribe(self, collection: str, callback: Subscriber) -> Callable[[], None]:
        """
        Register callback for the full collection. It fires once now and
        after every committed change. Returns an unsubscribe function.
        """
        self.model_for(collection)
        self._subscribers[collection].append(callback)
        callback(self.all(collection))

        def unsubscribe() -> None:
            if callback in self._subscribers[collection]:
                self._subscribers[collection].remove(callback)

        return unsubscribe

    def _notify(self, collection: str) -> None:
        callbacks = list(self._subscribers.get(collection, ()))
        if not callbacks:
            return
        try:
            snapshot = self.all(collection)
        except LeagueError:
            logger.exception("Could not read %s for subscribers after commit", collection)
            return
        for callback in callbacks:
            try:
                callback(list(snapshot))
            except Exception:
                # committed writes stand even when a view fails to rebuild
                logger.exception("Subscriber for %s failed", collection)
