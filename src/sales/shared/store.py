"""Record store port and its Protean repository adapter.

The order lifecycle only ever needs five things from storage: fetch one record,
add, update, delete, and enumerate. ``RecordStore`` names exactly that, so the
lifecycle can be handed a narrow per-entity store instead of the whole domain.
"""

from abc import ABC, abstractmethod

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain


class RecordStore(ABC):
    """Per-entity storage capability."""

    @abstractmethod
    def get(self, identifier):
        """Return the record with ``identifier``, or ``None`` when absent."""
        ...

    @abstractmethod
    def add(self, record):
        """Persist a new record and return its identifier."""
        ...

    @abstractmethod
    def update(self, record):
        """Persist changes to an existing record (children included)."""
        ...

    @abstractmethod
    def delete(self, record):
        """Remove a record by its identifier."""
        ...

    @abstractmethod
    def query_all(self):
        """Return every stored record."""
        ...


class RepositoryStore(RecordStore):
    """``RecordStore`` backed by the active domain's repository for ``record_cls``.

    Writes go through the repository so they join whatever unit of work is in
    progress; nothing here commits on its own.
    """

    def __init__(self, record_cls):
        self.record_cls = record_cls

    @property
    def repository(self):
        return current_domain.repository_for(self.record_cls)

    def get(self, identifier):
        try:
            return self.repository.get(identifier)
        except ObjectNotFoundError:
            return None

    def add(self, record):
        self.repository.add(record)
        return str(record.id)

    def update(self, record):
        # Protean repositories upsert: add() on a persisted aggregate syncs
        # the header and its added/changed/removed child entities.
        self.repository.add(record)

    def delete(self, record):
        self.repository._dao.delete(record)

    def query_all(self):
        return self.repository._dao.query.all().items

    def __repr__(self):
        return f"<RepositoryStore {self.record_cls.__name__}>"
