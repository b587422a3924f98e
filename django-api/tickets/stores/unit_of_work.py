"""Unit of work spanning the stores touched by a reservation.

Leaving the ``with`` block without calling ``commit()`` discards every
change, whether the block returned early or raised.
"""

import abc

from django.db import connection, transaction

from events.stores.django_store import DjangoEventStore, DjangoInventoryLedger
from events.stores.interfaces import EventStore, InventoryLedger
from tickets.stores.django_store import DjangoTicketStore
from tickets.stores.interfaces import TicketStore


class AbstractUnitOfWork(abc.ABC):
    events: EventStore
    ledger: InventoryLedger
    tickets: TicketStore

    def __enter__(self) -> "AbstractUnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.rollback()

    @abc.abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError


class DjangoUnitOfWork(AbstractUnitOfWork):
    """Unit of work backed by a ``transaction.atomic`` block."""

    def __init__(
        self,
        events: EventStore | None = None,
        ledger: InventoryLedger | None = None,
        tickets: TicketStore | None = None,
        lock_timeout_ms: int | None = None,
    ) -> None:
        self.events = events or DjangoEventStore()
        self.ledger = ledger or DjangoInventoryLedger()
        self.tickets = tickets or DjangoTicketStore()
        self._lock_timeout_ms = lock_timeout_ms
        self._atomic = None
        self._committed = False

    def __enter__(self) -> "DjangoUnitOfWork":
        self._committed = False
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        try:
            self._apply_lock_timeout()
        except BaseException as exc:
            self._close(type(exc), exc, exc.__traceback__)
            raise
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None and not self._committed:
            self.rollback()
        return self._close(exc_type, exc, tb)

    def commit(self) -> None:
        self._committed = True

    def rollback(self) -> None:
        transaction.set_rollback(True)

    def _close(self, exc_type, exc, tb):
        atomic, self._atomic = self._atomic, None
        return atomic.__exit__(exc_type, exc, tb)

    def _apply_lock_timeout(self) -> None:
        # Row lock waits end with an OperationalError instead of blocking forever.
        if self._lock_timeout_ms and connection.vendor == "postgresql":
            with connection.cursor() as cursor:
                cursor.execute(f"SET LOCAL lock_timeout = {int(self._lock_timeout_ms)}")
