"""Override configuration loaders.

A loader turns a package path and an override file name into the
``Overrides`` declared for that package. The store depends only on the
``OverrideLoader`` protocol so tests can inject counting or failing loaders.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

import yaml
from pydantic import ValidationError

from productmeta.errors import OverrideDecodeError
from productmeta.overrides.models import OverrideRecord, Overrides
from productmeta.types import PackagePath
from productmeta.utils.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class OverrideLoader(Protocol):
    """Common interface for override configuration sources."""

    def load(self, package_path: PackagePath, file_name: str) -> Overrides:
        """Load every override record declared for a package.

        Args:
            package_path: Package whose overrides are requested
            file_name: Name of the override file within the package folder

        Returns:
            Overrides for the package, empty if none are declared

        Raises:
            OverrideDecodeError: If the source exists but cannot be parsed
        """
        ...


class YamlOverrideLoader:
    """Reads ``<directory>/<package_path>/<file_name>`` as a YAML record list.

    A missing file means the package declares no overrides.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def path_for(self, package_path: PackagePath, file_name: str) -> Path:
        return self.directory / str(package_path) / file_name

    def load(self, package_path: PackagePath, file_name: str) -> Overrides:
        path = self.path_for(package_path, file_name)
        if not path.is_file():
            logger.debug("No override file", package_path=str(package_path), path=str(path))
            return Overrides()

        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise OverrideDecodeError(
                package_path, f"could not read override file {path}: {e}"
            ) from e

        return parse_overrides(raw, package_path)


def parse_overrides(raw, package_path: PackagePath) -> Overrides:
    """Validate raw YAML data into ``Overrides``.

    An empty document is treated as no overrides. Declaring the same product
    override type twice is rejected.
    """
    if raw is None:
        return Overrides()
    if not isinstance(raw, list):
        raise OverrideDecodeError(
            package_path,
            f"override file must contain a list of records, got {type(raw).__name__}",
        )

    records: list[OverrideRecord] = []
    for index, item in enumerate(raw):
        try:
            records.append(OverrideRecord.model_validate(item))
        except ValidationError as e:
            raise OverrideDecodeError(
                package_path, f"invalid override record #{index}: {e}"
            ) from e

    overrides = Overrides(records=records)
    duplicates = overrides.duplicate_kinds()
    if duplicates:
        raise OverrideDecodeError(
            package_path,
            "override declared more than once",
            kind=", ".join(duplicates),
        )
    return overrides
