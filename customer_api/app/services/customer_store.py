"""
In‑memory storage for customers.

``CustomerStore`` keeps customer records in a dictionary keyed by
UUID and is the single owner of those records: every read returns a
copy, so the only way to change a stored customer is through one of
the store's operations.

A single lock guards the dictionary.  FastAPI runs synchronous
handlers in a thread pool, and update, patch and delete are
read‑check‑then‑write sequences that must not interleave with a
concurrent delete of the same key.

Missing ids are not errors here.  ``get_by_id``, ``update`` and
``patch`` return ``None`` and leave the store untouched; ``delete`` is
idempotent and always reports success.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Set, Tuple

from customer_api.app.models.customer import Customer
from customer_api.app.schemas.customer import CustomerCreate, CustomerPatch, CustomerUpdate

logger = logging.getLogger(__name__)

# (customer_name, version) pairs loaded when seeding is enabled.
DEMO_CUSTOMERS: Tuple[Tuple[str, str], ...] = (
    ("Albert", "3542"),
    ("Felix", "2458"),
    ("Wilson", "8999"),
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _has_text(value: Optional[str]) -> bool:
    """Return True if ``value`` contains at least one non‑whitespace character."""
    return value is not None and bool(value.strip())


class CustomerStore:
    """Thread‑safe keyed collection of :class:`Customer` records."""

    def __init__(self) -> None:
        self._customers: Dict[uuid.UUID, Customer] = {}
        # Every id ever handed out, including deleted ones.  It grows by
        # one UUID per create and is never pruned, not even by clear();
        # that is the price of guaranteeing ids are never reused.
        self._issued_ids: Set[uuid.UUID] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)

    def _new_id(self) -> uuid.UUID:
        new_id = uuid.uuid4()
        while new_id in self._issued_ids:
            new_id = uuid.uuid4()
        self._issued_ids.add(new_id)
        return new_id

    def list(self) -> List[Customer]:
        """Return copies of all stored customers in insertion order."""
        with self._lock:
            return [replace(customer) for customer in self._customers.values()]

    def get_by_id(self, customer_id: uuid.UUID) -> Optional[Customer]:
        """Return a copy of the customer, or ``None`` if it does not exist."""
        with self._lock:
            customer = self._customers.get(customer_id)
            return replace(customer) if customer is not None else None

    def create(self, data: CustomerCreate) -> Customer:
        """Store a new customer and return it.

        The id and both timestamps are generated here; only
        ``customer_name`` and ``version`` are taken from ``data``.
        """
        now = _now()
        with self._lock:
            customer = Customer(
                id=self._new_id(),
                customer_name=data.customer_name,
                version=data.version,
                created_date=now,
                last_modified_date=now,
            )
            self._customers[customer.id] = customer
            logger.debug("Stored customer %s", customer.id)
            return replace(customer)

    def update(self, customer_id: uuid.UUID, data: CustomerUpdate) -> Optional[Customer]:
        """Replace the mutable fields of an existing customer.

        Returns the updated customer or ``None`` if ``customer_id`` is
        unknown, in which case nothing is changed.
        """
        with self._lock:
            existing = self._customers.get(customer_id)
            if existing is None:
                return None
            existing.customer_name = data.customer_name
            existing.version = data.version
            existing.last_modified_date = _now()
            return replace(existing)

    def patch(self, customer_id: uuid.UUID, data: CustomerPatch) -> Optional[Customer]:
        """Merge the present fields of ``data`` into an existing customer.

        ``customer_name`` is applied only when it has non‑whitespace
        text, so an empty string cannot blank the name.  ``version`` is
        applied whenever it is not ``None``.
        """
        with self._lock:
            existing = self._customers.get(customer_id)
            if existing is None:
                return None
            if _has_text(data.customer_name):
                existing.customer_name = data.customer_name
            if data.version is not None:
                existing.version = data.version
            existing.last_modified_date = _now()
            return replace(existing)

    def delete(self, customer_id: uuid.UUID) -> bool:
        """Remove a customer.  Deleting an unknown id is a no‑op.

        Always returns ``True``.
        """
        with self._lock:
            removed = self._customers.pop(customer_id, None)
        if removed is None:
            logger.debug("Delete ignored, customer %s not found", customer_id)
        else:
            logger.info("Removed customer %s", customer_id)
        return True

    def seed(self, customers: Iterable[Tuple[str, str]] = DEMO_CUSTOMERS) -> List[Customer]:
        """Create one customer per ``(customer_name, version)`` pair."""
        created = [
            self.create(CustomerCreate(customer_name=name, version=version))
            for name, version in customers
        ]
        logger.info("Seeded %d customers", len(created))
        return created

    def clear(self) -> None:
        """Drop every stored customer.  Issued ids stay reserved."""
        with self._lock:
            self._customers.clear()
