"""Resolution result types.

Lets the pipeline decide whether a configuration problem aborts the run
instead of the resolver terminating the process.
"""

from dataclasses import dataclass

from productmeta.errors import ProductMetadataError
from productmeta.metadata.product import ProductMetadata


@dataclass(frozen=True)
class ConfigError:
    """Why metadata could not be resolved for a package."""

    kind: str | None
    package_path: str
    detail: str
    error_type: str

    @classmethod
    def from_exception(cls, error: ProductMetadataError) -> "ConfigError":
        return cls(
            kind=error.kind,
            package_path=error.package_path,
            detail=error.detail,
            error_type=type(error).__name__,
        )

    def format_error(self) -> str:
        kind = f" [{self.kind}]" if self.kind else ""
        return f"{self.error_type} for {self.package_path}{kind}: {self.detail}"


@dataclass(frozen=True)
class ResolutionResult:
    """Either resolved metadata or the configuration error that prevented it.

    Never carries partial metadata.
    """

    metadata: ProductMetadata | None = None
    error: ConfigError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        return not self.ok

    def unwrap(self) -> ProductMetadata:
        if self.metadata is None:
            raise ValueError(self.error.format_error() if self.error else "no metadata")
        return self.metadata
