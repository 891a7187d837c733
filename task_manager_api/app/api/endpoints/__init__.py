"""
Endpoint modules.

Each module defines an ``APIRouter`` for one resource; they are mounted
in ``api/router.py``.
"""
