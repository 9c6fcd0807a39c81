"""Per-package product metadata resolution for provider code generation.

This package provides:
- Case conversion utilities for product and base path names
- An override store that lazily loads hand-authored product overrides
- A resolver that merges document-derived values with those overrides
"""

from .metadata import ProductMetadata, ProductMetadataResolver
from .overrides import OverrideKind, OverrideStore, YamlOverrideLoader

__all__ = [
    "OverrideKind",
    "OverrideStore",
    "ProductMetadata",
    "ProductMetadataResolver",
    "YamlOverrideLoader",
]
