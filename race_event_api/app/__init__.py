"""
Application package initializer.

The project is organised into layers: ``core`` (settings, logging,
errors, security), ``schemas`` (Pydantic payloads), ``storage`` (the
swappable entity store), ``services`` (business rules) and ``api``
(one router per resource).  ``main`` wires them into a FastAPI app.
"""

from .main import app, create_app  # noqa: F401
