"""Storage fault taxonomy.

Driver and SQLAlchemy errors are translated into two kinds: transient faults
that the retry policy may repeat, and everything else.
"""

from __future__ import annotations

from sqlalchemy import exc as sa_exc


class StorageFault(Exception):
    """A storage-layer failure that is not expected to go away on retry."""


class TransientStorageFault(StorageFault):
    """A storage-layer failure expected to be temporary (connection reset, timeout, lock)."""


_TRANSIENT_TYPES = (
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,
)

# Driver messages of OperationalErrors that describe the connection or a lock,
# not the statement. SQLite also reports schema and syntax errors as
# OperationalError, and those are permanent.
_TRANSIENT_MESSAGES = (
    "database is locked",
    "database table is locked",
    "disk i/o error",
    "connection reset",
    "connection refused",
    "connection timed out",
    "server closed the connection",
    "lost connection",
    "could not connect",
    "terminating connection",
)


def _driver_message(error: sa_exc.DBAPIError) -> str:
    return str(error.orig if error.orig is not None else error).lower()


def is_transient(error: BaseException) -> bool:
    """True if a raw SQLAlchemy/driver error should be classified as transient."""
    if isinstance(error, _TRANSIENT_TYPES):
        return True
    if isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated:
        return True
    if isinstance(error, sa_exc.OperationalError):
        message = _driver_message(error)
        return any(marker in message for marker in _TRANSIENT_MESSAGES)
    return False


def classify(error: BaseException, action: str) -> StorageFault:
    """Wrap ``error`` in the matching StorageFault subclass."""
    if isinstance(error, StorageFault):
        return error
    if is_transient(error):
        return TransientStorageFault(f"Transient storage failure during {action}: {error}")
    return StorageFault(f"Storage failure during {action}: {error}")
