"""
Package archive builder.
"""

from .builder import PackageBuilder

__all__ = ["PackageBuilder"]
