"""
Install/uninstall lifecycle.

This package handles:
1. Extracting package archives
2. Running lifecycle scripts
3. Creating and removing exports
4. Rolling back failed installs
"""

from .archive import extract
from .scripts import run_script
from .lifecycle import InstallPlan, InstallState, LifecycleEngine

__all__ = [
    "InstallPlan",
    "InstallState",
    "LifecycleEngine",
    "extract",
    "run_script",
]
