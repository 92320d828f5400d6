"""
Endpoint subpackage.

Each module defines an APIRouter for one concern (videos, statistics,
pages).  The JSON routers are aggregated in ``api/router.py``.
"""
