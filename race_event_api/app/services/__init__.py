"""
Service layer.

Each service encapsulates the business logic for one resource and
depends only on the ``Storage`` interface, so swapping the in‑memory
store for a database does not touch the API handlers.
"""
