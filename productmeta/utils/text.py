"""Text transformation utilities.

Pure functions for identifier case conversions.
"""

import re

_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
# "OSConfig" -> "OS_Config"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
# "fooBar" -> "foo_Bar", "v1Beta" -> "v1_Beta"
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_REPEATED_UNDERSCORES = re.compile(r"_+")


def to_snake_case(s: str) -> str:
    """Convert an identifier-like string to snake_case.

    Any run of characters other than ASCII letters and digits is treated as a
    separator, camelCase and acronym boundaries are split.

    Examples:
        to_snake_case("OS Config") → "os_config"
        to_snake_case("AccessContextManager") → "access_context_manager"
        to_snake_case("OSConfig") → "os_config"
    """
    s = _SEPARATORS.sub("_", s)
    s = _ACRONYM_BOUNDARY.sub(r"\1_\2", s)
    s = _CAMEL_BOUNDARY.sub(r"\1_\2", s)
    s = _REPEATED_UNDERSCORES.sub("_", s)
    return s.strip("_").lower()


def to_title_case(snake: str) -> str:
    """Convert snake_case to TitleCase, e.g. "storage_bucket" → "StorageBucket"."""
    return "".join(part[:1].upper() + part[1:] for part in snake.split("_"))


def to_upper_case(snake: str) -> str:
    return snake.upper()


def base_path_title_case(snake: str) -> str:
    """TitleCase for base path identifiers.

    Identifiers starting with "os" render as "OS..." ("OSConfig", not
    "OsConfig") to match the naming used by the existing provider.
    """
    title = to_title_case(snake)
    if snake.startswith("os"):
        return "OS" + title[2:]
    return title
