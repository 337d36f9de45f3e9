"""
Endpoint subpackage.

Each module defines an APIRouter for one domain (accounts, blogs,
search, service info).  The routers are aggregated in ``api/router.py``
and then included in the main application.
"""
