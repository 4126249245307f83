"""
Community catalog synchronization.
"""

from .sync import CatalogSynchronizer, render_progress

__all__ = ["CatalogSynchronizer", "render_progress"]
