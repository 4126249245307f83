"""
homebruh: a minimal package manager.

Fetches a package's catalog entry, downloads and verifies its archive,
unpacks it and runs the manifest-driven install lifecycle.
"""

__version__ = "0.1.0"

from homebruh.bruh_config import BruhConfig
from homebruh.bruh_logger import BruhLogger
from homebruh.package_lifecycle import LifecycleEngine
from homebruh.package_store import ContentStore

__all__ = ["BruhConfig", "BruhLogger", "ContentStore", "LifecycleEngine", "__version__"]
