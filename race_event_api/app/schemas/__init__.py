"""
Pydantic schema definitions for API payloads.

Each entity defines a ``*Create`` request body, a partial ``*Update``
body and the stored record returned in responses.  Users additionally
have a public ``UserRead`` view without the password.
"""
