"""Process-lifetime cache of product overrides.

The store is built once by the generation pipeline and passed to the
resolver. Overrides for a package path are loaded at most once; entries are
never evicted or modified afterwards.
"""

import threading
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from productmeta.config import OverridesSettings, get_settings
from productmeta.const import PRODUCT_OVERRIDES_FILE
from productmeta.errors import OverrideDecodeError, OverridesNotLoadedError
from productmeta.overrides.loader import OverrideLoader, YamlOverrideLoader
from productmeta.overrides.models import OverrideKind, Overrides
from productmeta.types import PackagePath
from productmeta.utils.logging import get_logger

logger = get_logger(__name__)

DetailsT = TypeVar("DetailsT", bound=BaseModel)


class OverrideStore:
    """Loads and caches override records per package path.

    Concurrent first requests for the same package path perform a single
    load; requests for different paths do not block each other.
    """

    def __init__(
        self,
        loader: OverrideLoader,
        file_name: str = PRODUCT_OVERRIDES_FILE,
        auto_load: bool = False,
    ):
        """Initialize the store.

        Args:
            loader: Source of override records
            file_name: Override file name passed to the loader
            auto_load: Load on first lookup instead of raising
                OverridesNotLoadedError
        """
        self.loader = loader
        self.file_name = file_name
        self.auto_load = auto_load
        self._overrides: dict[PackagePath, Overrides] = {}
        self._path_locks: dict[PackagePath, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: OverridesSettings | None = None) -> "OverrideStore":
        """Build a store reading YAML override files as configured."""
        settings = settings or get_settings().overrides
        return cls(
            YamlOverrideLoader(settings.directory),
            file_name=settings.file_name,
            auto_load=settings.auto_load,
        )

    def _lock_for(self, package_path: PackagePath) -> threading.Lock:
        with self._registry_lock:
            return self._path_locks.setdefault(package_path, threading.Lock())

    def ensure_loaded(self, package_path: PackagePath) -> Overrides:
        """Load overrides for a package path unless already cached.

        Raises:
            OverrideDecodeError: If the loader cannot parse the overrides
        """
        package_path = PackagePath(package_path)
        cached = self._overrides.get(package_path)
        if cached is not None:
            return cached

        with self._lock_for(package_path):
            cached = self._overrides.get(package_path)
            if cached is not None:
                return cached

            overrides = self.loader.load(package_path, self.file_name)
            self._overrides[package_path] = overrides
            logger.info(
                "Loaded product overrides",
                package_path=str(package_path),
                records=len(overrides),
            )
            return overrides

    def is_loaded(self, package_path: PackagePath) -> bool:
        return PackagePath(package_path) in self._overrides

    def loaded_paths(self) -> list[PackagePath]:
        return list(self._overrides)

    def get(self, package_path: PackagePath) -> Overrides:
        """Return the cached overrides for a package path.

        Raises:
            OverridesNotLoadedError: If the path was never loaded and the
                store does not auto-load
        """
        package_path = PackagePath(package_path)
        overrides = self._overrides.get(package_path)
        if overrides is not None:
            return overrides
        if self.auto_load:
            return self.ensure_loaded(package_path)
        raise OverridesNotLoadedError(
            package_path, "product overrides should be loaded already"
        )

    def lookup(
        self,
        package_path: PackagePath,
        kind: OverrideKind,
        details_model: type[DetailsT],
    ) -> DetailsT | None:
        """Decode the override of ``kind`` for a package path.

        Args:
            package_path: Package to look up
            kind: Product override type
            details_model: Pydantic model the override details decode into

        Returns:
            The decoded details, or None when no such override is declared

        Raises:
            OverrideDecodeError: If the override exists but is malformed
            OverridesNotLoadedError: If the path was never loaded
        """
        record = self.get(package_path).find(kind)
        if record is None:
            return None

        try:
            details = details_model.model_validate(record.details)
        except ValidationError as e:
            raise OverrideDecodeError(
                package_path, f"could not decode override details: {e}", kind=kind
            ) from e

        logger.debug("Found product override", package_path=str(package_path), kind=str(kind))
        return details
