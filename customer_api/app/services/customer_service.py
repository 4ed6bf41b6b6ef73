"""
Service facade for customers.

``CustomerService`` is what the API handlers call.  It delegates to a
:class:`CustomerStore` and converts stored records into
:class:`CustomerRead` schemas.  Lookups that miss return ``None`` so the
handler must decide between a 404 and a success response; a missing
customer is never represented by an empty object.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from customer_api.app.models.customer import Customer
from customer_api.app.schemas.customer import (
    CustomerCreate,
    CustomerPatch,
    CustomerRead,
    CustomerUpdate,
)
from customer_api.app.services.customer_store import CustomerStore

logger = logging.getLogger(__name__)


class CustomerService:
    """Contract between the HTTP layer and the customer store."""

    def __init__(self, store: CustomerStore) -> None:
        self.store = store

    def list_customers(self) -> List[CustomerRead]:
        return [self._to_read(customer) for customer in self.store.list()]

    def get_customer_by_id(self, customer_id: uuid.UUID) -> Optional[CustomerRead]:
        customer = self.store.get_by_id(customer_id)
        if customer is None:
            return None
        return self._to_read(customer)

    def save_new_customer(self, data: CustomerCreate) -> CustomerRead:
        """Create a customer and return it with its generated id."""
        customer = self.store.create(data)
        logger.info("Created customer %s", customer.id)
        return self._to_read(customer)

    def update_customer_by_id(self, customer_id: uuid.UUID, data: CustomerUpdate) -> Optional[CustomerRead]:
        """Replace name and version.  Returns ``None`` if the customer does not exist."""
        customer = self.store.update(customer_id, data)
        if customer is None:
            logger.info("Update skipped, customer %s not found", customer_id)
            return None
        logger.info("Updated customer %s", customer_id)
        return self._to_read(customer)

    def patch_customer_by_id(self, customer_id: uuid.UUID, data: CustomerPatch) -> Optional[CustomerRead]:
        """Apply a partial update.  Returns ``None`` if the customer does not exist."""
        customer = self.store.patch(customer_id, data)
        if customer is None:
            logger.info("Patch skipped, customer %s not found", customer_id)
            return None
        logger.info("Patched customer %s", customer_id)
        return self._to_read(customer)

    def delete_by_id(self, customer_id: uuid.UUID) -> bool:
        """Delete a customer.

        Deletion is idempotent: the result is ``True`` whether or not the
        customer existed, so clients can safely retry.
        """
        return self.store.delete(customer_id)

    @staticmethod
    def _to_read(customer: Customer) -> CustomerRead:
        return CustomerRead(
            id=customer.id,
            customer_name=customer.customer_name,
            version=customer.version,
            created_date=customer.created_date,
            last_modified_date=customer.last_modified_date,
        )
