# ASGI entry point
"""
================================================================================
FILE: edge_admin/api/asgi.py
================================================================================

PURPOSE:
    ASGI entry point for production servers (uvicorn, gunicorn with uvicorn
    workers, containers). Exposes the `app` object built in main.py.

KEY FACTS:
    - Never modify app behavior in this file; use main.py for app setup
    - Used by: uvicorn edge_admin.api.asgi:app, and the edge-admin CLI
"""

from .main import app

# Do NOT rename this variable; ASGI servers look for 'app' by default
__all__ = ["app"]
