"""Hand-authored product overrides.

Public API:
    OverrideStore - Process-lifetime cache of overrides per package path
    YamlOverrideLoader - Reads per-package YAML override files
    OverrideKind - Product override types
"""

from .loader import OverrideLoader, YamlOverrideLoader, parse_overrides
from .models import (
    OverrideKind,
    OverrideRecord,
    Overrides,
    ProductBasePathDetails,
    ProductDocsSectionDetails,
    ProductTitleDetails,
)
from .store import OverrideStore

__all__ = [
    "OverrideKind",
    "OverrideLoader",
    "OverrideRecord",
    "OverrideStore",
    "Overrides",
    "ProductBasePathDetails",
    "ProductDocsSectionDetails",
    "ProductTitleDetails",
    "YamlOverrideLoader",
    "parse_overrides",
]
