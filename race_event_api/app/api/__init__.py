"""
HTTP layer.

``router.py`` aggregates one router per resource from ``endpoints``;
the application mounts it under ``/api``.
"""
