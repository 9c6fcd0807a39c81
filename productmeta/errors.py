"""Errors raised while resolving product metadata.

Every error names the package path and, where one is involved, the override
kind, so the pipeline can report exactly which configuration to fix.
"""


class ProductMetadataError(Exception):
    """Base error for unrecoverable product metadata problems."""

    def __init__(self, package_path, detail: str, kind: str | None = None):
        self.package_path = str(package_path)
        self.detail = detail
        self.kind = str(kind) if kind is not None else None
        super().__init__(self._format())

    def _format(self) -> str:
        if self.kind:
            return f"{self.package_path} [{self.kind}]: {self.detail}"
        return f"{self.package_path}: {self.detail}"


class OverrideDecodeError(ProductMetadataError):
    """An override exists but cannot be read into its expected shape."""


class MissingTitleError(ProductMetadataError):
    """No product title could be derived for a package."""


class EmptyTitleOverrideError(MissingTitleError):
    """A title override is declared but carries no title."""


class OverridesNotLoadedError(ProductMetadataError):
    """Overrides were queried before being loaded for a package path."""
