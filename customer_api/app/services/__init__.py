"""
Service layer abstraction.

``CustomerStore`` owns the in‑memory customer records and
``CustomerService`` is the contract the API handlers call.  Swapping
the store for a database‑backed implementation does not require
changes to the handlers.
"""
