"""
Configuration layer. Exports the Settings class for clean imports:

    from edge_admin.config import Settings
"""

from edge_admin.config.settings import Settings

__all__ = ["Settings"]
