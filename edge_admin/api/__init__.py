# 5 files: HTTP surface
"""
================================================================================
FILE: edge_admin/api/__init__.py
================================================================================

PURPOSE:
    Package initialization for the API layer. Exports the resource router and
    the fallback router (unknown /api paths, dashboard document).

KEY FACTS:
    - Minimal file (just exports)
    - The fallback router must be included AFTER the resource router

TESTING ENVIRONMENT:
    - Import routers in tests: from edge_admin.api import router
"""

from edge_admin.api.routes import router, fallback_router

__all__ = ["router", "fallback_router"]
