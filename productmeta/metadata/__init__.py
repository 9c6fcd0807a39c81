"""Product metadata resolution.

Public API:
    ProductMetadataResolver - Builds ProductMetadata for a package path
    ProductMetadata - Resolved product identity with derived accessors
    ResolutionResult - Metadata or the configuration error preventing it
"""

from .document import document_title, load_document, load_document_title
from .product import ProductMetadata
from .resolver import ProductMetadataResolver, new_product_metadata
from .results import ConfigError, ResolutionResult

__all__ = [
    "ConfigError",
    "ProductMetadata",
    "ProductMetadataResolver",
    "ResolutionResult",
    "document_title",
    "load_document",
    "load_document_title",
    "new_product_metadata",
]
