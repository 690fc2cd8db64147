# ============================================
# projects/transactions.py
# ============================================
"""
Executors for multi-write units of work.

``AtomicExecutor`` runs the unit inside ``transaction.atomic``;
``SequentialExecutor`` runs the very same steps one after another with
autocommit, for databases that cannot roll several writes back together.
Callers pick one with ``get_executor()`` and degrade to the sequential one
only when ``AtomicityUnsupported`` is raised.
"""
import logging
from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, connections, transaction

from projects.exceptions import AtomicityUnsupported

logger = logging.getLogger(__name__)

T = TypeVar('T')


class TransactionalExecutor(ABC):
    # True when the unit runs inside a transaction, so row locks are usable
    atomic = False

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    @abstractmethod
    def run(self, work: Callable[['TransactionalExecutor'], T]) -> T:
        """Execute ``work`` and return its result"""


class AtomicExecutor(TransactionalExecutor):
    atomic = True

    def run(self, work):
        if not supports_atomic_writes(self.using):
            raise AtomicityUnsupported(
                f"Database '{self.using}' does not support transactions"
            )
        with transaction.atomic(using=self.using):
            return work(self)


class SequentialExecutor(TransactionalExecutor):

    def run(self, work):
        return work(self)


def supports_atomic_writes(using: str = DEFAULT_DB_ALIAS) -> bool:
    return bool(connections[using].features.supports_transactions)


def get_executor(using: str = DEFAULT_DB_ALIAS) -> TransactionalExecutor:
    """
    Pick an executor from the TRACKER_ATOMIC_WRITES setting:
    - "auto" (default): atomic, the capability is checked on every run
    - True: atomic
    - False: sequential, no transaction is opened at all
    """
    mode = getattr(settings, 'TRACKER_ATOMIC_WRITES', 'auto')
    if mode is False:
        return SequentialExecutor(using)
    if mode not in ('auto', True):
        logger.warning("[transactions] Unknown TRACKER_ATOMIC_WRITES=%r, using auto", mode)
    return AtomicExecutor(using)
