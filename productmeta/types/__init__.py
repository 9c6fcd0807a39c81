"""Core value types for product metadata."""

from .names import BasePathIdentifier, PackageName, PackagePath, ProductName

__all__ = [
    "BasePathIdentifier",
    "PackageName",
    "PackagePath",
    "ProductName",
]
