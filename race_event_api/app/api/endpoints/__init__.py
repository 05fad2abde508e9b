"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one resource
(events, registrations, race packs ...).  The routers are aggregated
in ``api/router.py`` and mounted under ``/api`` by the application.
"""
