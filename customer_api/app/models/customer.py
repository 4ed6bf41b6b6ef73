"""Customer entity stored by :class:`CustomerStore`."""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Customer:
    """A customer record with persistent identity.

    ``id`` and ``created_date`` are assigned by the store on creation
    and never change afterwards.  ``version`` is an opaque stamp set
    by clients; it is not checked for conflicts.
    """

    id: uuid.UUID
    customer_name: Optional[str]
    version: Optional[str]
    created_date: datetime
    last_modified_date: datetime
