"""Commit unit — the all-or-nothing envelope around one order operation.

Writes are staged first and only handed to the record stores when ``commit()``
is called, inside a single Protean ``UnitOfWork``. When a command handler has
already opened a unit of work the staged writes join it, so the handler's
commit remains the one flush for the whole operation.

Cancellation is cooperative: a ``CancelToken`` can stop the operation any time
before ``commit()`` starts. After that the batch always runs to completion.
"""

import threading
from enum import Enum

from protean.core.unit_of_work import UnitOfWork
from protean.exceptions import InvalidOperationError
from protean.utils.globals import current_uow

from sales.shared.exceptions import CommitFailure, OperationCancelled
from sales.utils.logging import get_logger

logger = get_logger(__name__)


class CommitState(Enum):
    OPEN = "Open"
    COMMITTING = "Committing"
    COMMITTED = "Committed"
    CANCELLED = "Cancelled"
    FAILED = "Failed"


class CancelToken:
    """Thread-safe cancellation flag shared between a caller and an operation."""

    def __init__(self):
        self._event = threading.Event()
        self._reason = None

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str = "manual") -> None:
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()


class CommitUnit:
    """Collects add/update/delete operations and applies them as one batch."""

    def __init__(self, cancel_token: CancelToken | None = None):
        self._staged = []
        self._token = cancel_token or CancelToken()
        self._lock = threading.Lock()
        self.state = CommitState.OPEN

    @property
    def pending(self) -> int:
        return len(self._staged)

    def add(self, store, record):
        self._stage("add", store, record)

    def update(self, store, record):
        self._stage("update", store, record)

    def delete(self, store, record):
        self._stage("delete", store, record)

    def _stage(self, operation, store, record):
        if self.state is not CommitState.OPEN:
            raise InvalidOperationError(f"Cannot stage writes on a {self.state.value.lower()} commit unit")
        self._staged.append((operation, store, record))

    def cancel(self, reason: str = "manual") -> bool:
        """Request cancellation. Returns ``False`` once the commit has started."""
        with self._lock:
            if self.state is not CommitState.OPEN:
                return False
            self._token.cancel(reason)
            return True

    def commit(self) -> int:
        """Apply every staged write atomically and return how many records were written.

        Raises ``OperationCancelled`` if the token was cancelled beforehand, and
        ``CommitFailure`` if any write or the final flush fails.
        """
        with self._lock:
            if self.state is not CommitState.OPEN:
                raise InvalidOperationError(f"Commit unit is already {self.state.value.lower()}")
            if self._token.is_cancelled:
                self.state = CommitState.CANCELLED
                discarded = len(self._staged)
                self._staged.clear()
                logger.info("commit.cancelled", reason=self._token.reason, discarded=discarded)
                raise OperationCancelled(self._token.reason)
            self.state = CommitState.COMMITTING

        staged = list(self._staged)
        try:
            if current_uow and current_uow.in_progress:
                self._apply(staged)
            else:
                with UnitOfWork():
                    self._apply(staged)
        except Exception as exc:
            self.state = CommitState.FAILED
            logger.error("commit.failed", records=len(staged), error=str(exc))
            raise CommitFailure(f"Commit of {len(staged)} record(s) failed: {exc}") from exc

        self.state = CommitState.COMMITTED
        self._staged.clear()
        return len(staged)

    @staticmethod
    def _apply(staged):
        for operation, store, record in staged:
            getattr(store, operation)(record)
