"""Product metadata resolution.

Merges the product title found in the API document with the package's
hand-authored overrides. Title precedence:

1. A PRODUCT_TITLE override (which must not be empty)
2. The document title up to its first "/"
"""

from collections.abc import Mapping
from typing import Any

from productmeta.const import PATH_SEPARATOR
from productmeta.errors import (
    EmptyTitleOverrideError,
    MissingTitleError,
    ProductMetadataError,
)
from productmeta.metadata.document import document_title as title_of
from productmeta.metadata.product import ProductMetadata
from productmeta.metadata.results import ConfigError, ResolutionResult
from productmeta.overrides.models import OverrideKind, ProductTitleDetails
from productmeta.overrides.store import OverrideStore
from productmeta.types import PackagePath, ProductName
from productmeta.utils.logging import get_logger

logger = get_logger(__name__)


def new_product_metadata(
    package_path: PackagePath, title: str, store: OverrideStore
) -> ProductMetadata:
    """Build metadata for a package from an already chosen title."""
    package_path = PackagePath(package_path)
    return ProductMetadata(
        package_path=package_path,
        package_name=package_path.package_name,
        product_name=ProductName.from_title(title),
        store=store,
    )


class ProductMetadataResolver:
    """Resolves the product identity of packages against an override store."""

    def __init__(self, store: OverrideStore):
        self.store = store

    def resolve(self, document_title: str, package_path: PackagePath) -> ProductMetadata:
        """Resolve metadata for one package.

        Args:
            document_title: ``info.title`` of the package's API document
            package_path: Path of the package, also the override lookup key

        Returns:
            Newly built ProductMetadata; the resolver keeps no copy

        Raises:
            OverrideDecodeError: If an override is malformed
            EmptyTitleOverrideError: If the title override has no title
            MissingTitleError: If no title can be derived
        """
        package_path = PackagePath(package_path)
        self.store.ensure_loaded(package_path)

        title = self._product_title(document_title, package_path)
        metadata = new_product_metadata(package_path, title, self.store)
        logger.debug(
            "Resolved product metadata",
            package_path=str(package_path),
            product_name=str(metadata.product_name),
        )
        return metadata

    def resolve_document(
        self, document: Mapping[str, Any], package_path: PackagePath
    ) -> ProductMetadata:
        """Resolve metadata using the title of a parsed API document."""
        return self.resolve(title_of(document), package_path)

    def try_resolve(
        self, document_title: str, package_path: PackagePath
    ) -> ResolutionResult:
        """Like ``resolve`` but returns configuration errors as a result."""
        try:
            return ResolutionResult(metadata=self.resolve(document_title, package_path))
        except ProductMetadataError as e:
            logger.warning("Could not resolve product metadata", error=str(e))
            return ResolutionResult(error=ConfigError.from_exception(e))

    def _product_title(self, document_title: str, package_path: PackagePath) -> str:
        override = self.store.lookup(package_path, OverrideKind.TITLE, ProductTitleDetails)
        if override is not None:
            if not override.title or not ProductName.from_title(override.title):
                raise EmptyTitleOverrideError(
                    package_path,
                    "product title override defined but got empty value",
                    kind=OverrideKind.TITLE,
                )
            return override.title

        title = (document_title or "").split(PATH_SEPARATOR, 1)[0].strip()
        if not title:
            raise MissingTitleError(
                package_path, "could not find product information in document title"
            )
        if not ProductName.from_title(title):
            raise MissingTitleError(
                package_path, f"document title {document_title!r} has no usable product name"
            )
        return title
