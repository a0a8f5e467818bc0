"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one domain (users, events, trainers,
admin, invoice).  The routers are aggregated in ``router.py``.
"""
