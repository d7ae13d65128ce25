# errors.py
# Error kinds raised by services and the store.
# Routes do not catch these; main.create_app maps them to HTTP responses.


class LeagueError(Exception):
    """Base class for every error the ledger reports to a caller."""
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(LeagueError):
    """Missing or invalid user input. Raised before any store call."""
    status_code = 400


class StoreUnavailable(LeagueError):
    """No connection to the document store."""
    status_code = 503


class StoreOperationFailed(LeagueError):
    """A read, write or batch call was rejected by the store."""
    status_code = 500


class RecordNotFound(StoreOperationFailed):
    status_code = 404
