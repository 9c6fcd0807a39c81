"""Resolved product metadata and its derived views."""

from dataclasses import dataclass, field
from typing import Any

from productmeta.overrides.models import (
    OverrideKind,
    ProductBasePathDetails,
    ProductDocsSectionDetails,
)
from productmeta.overrides.store import OverrideStore
from productmeta.types import BasePathIdentifier, PackageName, PackagePath, ProductName


@dataclass(frozen=True)
class ProductMetadata:
    """Product identity of one package.

    Holds no override data itself: every derived accessor re-reads the
    store by package path, so the store must outlive the metadata.
    """

    package_path: PackagePath
    package_name: PackageName
    product_name: ProductName
    store: OverrideStore = field(repr=False, compare=False)

    def base_path_details(self) -> ProductBasePathDetails | None:
        return self.store.lookup(
            self.package_path, OverrideKind.BASE_PATH, ProductBasePathDetails
        )

    def should_write_base_path(self) -> bool:
        details = self.base_path_details()
        if details is None:
            return True
        return not details.skip

    def base_path_identifier(self) -> BasePathIdentifier:
        details = self.base_path_details()
        if details is not None and details.base_path_identifier:
            return BasePathIdentifier(details.base_path_identifier)
        return BasePathIdentifier(self.product_name.snakecase())

    def base_path_identifier_title_case(self) -> str:
        return self.base_path_identifier().title()

    def docs_section(self) -> str:
        details = self.store.lookup(
            self.package_path, OverrideKind.DOCS_SECTION, ProductDocsSectionDetails
        )
        if details is not None:
            return details.docs_section
        return self.package_name.lowercase()

    def client_library_package_token(self) -> str:
        """Package name of the client library for this package.

        For example, "access_context_manager" maps to "accesscontextmanager".
        """
        return self.package_path.client_library_token

    def product_title_case(self) -> str:
        return self.product_name.title()

    def as_dict(self) -> dict[str, Any]:
        """Every resolved form, keyed for template expansion."""
        base_path = self.base_path_identifier()
        return {
            "package_path": str(self.package_path),
            "package_name": str(self.package_name),
            "product_name": self.product_name.snakecase(),
            "product_title": self.product_title_case(),
            "product_upper": self.product_name.upper(),
            "base_path_identifier": base_path.snakecase(),
            "base_path_identifier_title": base_path.title(),
            "base_path_identifier_upper": base_path.upper(),
            "should_write_base_path": self.should_write_base_path(),
            "docs_section": self.docs_section(),
            "client_library_package": self.client_library_package_token(),
        }
