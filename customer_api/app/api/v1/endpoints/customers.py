"""
Customer endpoints for API v1.

These routes expose a CRUD API for customers backed by
:class:`CustomerService`.  All routes require HTTP Basic credentials.

Status codes:

* ``GET`` list → 200, ``GET`` by id → 200 or 404
* ``POST`` → 201 with a ``Location`` header pointing at the new customer
* ``PUT`` and ``PATCH`` → 204 or 404
* ``DELETE`` → 204; deleting an unknown id also returns 204
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from customer_api.app.core.security import get_current_user
from customer_api.app.schemas.customer import (
    CustomerCreate,
    CustomerPatch,
    CustomerRead,
    CustomerUpdate,
)
from customer_api.app.services.customer_service import CustomerService

CUSTOMER_PATH = "/api/v1/customer"

router = APIRouter(dependencies=[Depends(get_current_user)])


def get_customer_service(request: Request) -> CustomerService:
    """Return the service instance created by ``create_app``."""
    return request.app.state.customer_service


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")


@router.get("", response_model=List[CustomerRead])
def list_customers(service: CustomerService = Depends(get_customer_service)) -> List[CustomerRead]:
    """Return all customers.  An empty store yields an empty list."""
    return service.list_customers()


@router.get("/{customer_id}", response_model=CustomerRead)
def get_customer(
    customer_id: uuid.UUID,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerRead:
    """Retrieve a single customer by ID.  Returns HTTP 404 if not found."""
    customer = service.get_customer_by_id(customer_id)
    if customer is None:
        raise _not_found()
    return customer


@router.post("", status_code=status.HTTP_201_CREATED)
def create_customer(
    customer_in: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    """Create a customer.

    The response has no body; the new resource is referenced by the
    ``Location`` header.
    """
    customer = service.save_new_customer(customer_in)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{CUSTOMER_PATH}/{customer.id}"},
    )


@router.put("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_customer(
    customer_id: uuid.UUID,
    customer_in: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> None:
    """Replace the name and version of an existing customer."""
    if service.update_customer_by_id(customer_id, customer_in) is None:
        raise _not_found()
    return None


@router.patch("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def patch_customer(
    customer_id: uuid.UUID,
    customer_in: CustomerPatch,
    service: CustomerService = Depends(get_customer_service),
) -> None:
    """Update only the fields present in the request body."""
    if service.patch_customer_by_id(customer_id, customer_in) is None:
        raise _not_found()
    return None


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: uuid.UUID,
    service: CustomerService = Depends(get_customer_service),
) -> None:
    """Delete a customer.  Unknown ids are accepted so retries are safe."""
    service.delete_by_id(customer_id)
    return None
