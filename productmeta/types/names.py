"""Name value objects.

Each name wraps a plain string and exposes only the conversions that make
sense for its role, so a package path is never used where a product name is
expected.
"""

from productmeta.const import PATH_SEPARATOR
from productmeta.utils.text import (
    base_path_title_case,
    to_snake_case,
    to_title_case,
    to_upper_case,
)


class _Name:
    def __init__(self, value: str):
        self._value = str(value)

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self._value}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __bool__(self) -> bool:
        return bool(self._value)


class PackagePath(_Name):
    """Value object for the path of a package relative to the API definitions.

    Leading and trailing "/" are dropped, so "/foo_bar/" and "foo_bar" are
    the same package and share a cache entry, package name and client
    library token.

    Examples:
        PackagePath("compute/beta").package_name → PackageName('compute')
        PackagePath("access_context_manager").client_library_token
            → "accesscontextmanager"
    """

    def __init__(self, value: str):
        super().__init__(str(value).strip(PATH_SEPARATOR))

    @property
    def segments(self) -> list[str]:
        return self._value.split(PATH_SEPARATOR)

    @property
    def package_name(self) -> "PackageName":
        return PackageName(self.segments[0])

    @property
    def client_library_token(self) -> str:
        """Package name used by the client library ("access_context_manager"
        becomes "accesscontextmanager")."""
        return self._value.replace("_", "")


class PackageName(_Name):
    """Namespace of the package, normally a lowercase form of the product."""

    def lowercase(self) -> str:
        return self._value


class ProductName(_Name):
    """Snake case name of the product a resource belongs to."""

    @classmethod
    def from_title(cls, title: str) -> "ProductName":
        return cls(to_snake_case(title))

    def snakecase(self) -> str:
        return self._value

    def title(self) -> str:
        return to_title_case(self._value)

    def upper(self) -> str:
        return to_upper_case(self._value)


class BasePathIdentifier(_Name):
    """Snake case identifier used for the product's base path."""

    def snakecase(self) -> str:
        return self._value

    def title(self) -> str:
        return base_path_title_case(self._value)

    def upper(self) -> str:
        return to_upper_case(self._value)
