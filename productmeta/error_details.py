"""Error message formatting for user-friendly exception handling."""

from pydantic import ValidationError

from productmeta.errors import (
    EmptyTitleOverrideError,
    MissingTitleError,
    OverrideDecodeError,
    OverridesNotLoadedError,
)


def _format_decode_error(error: OverrideDecodeError) -> str:
    kind = f" ({error.kind})" if error.kind else ""
    return (
        f"Invalid product override{kind} for package '{error.package_path}'.\n"
        "Fix the override file before generating.\n"
        f"Details: {error.detail}"
    )


ERROR_TYPES = {
    OverrideDecodeError: _format_decode_error,
    EmptyTitleOverrideError: lambda e: (
        f"Product title override for package '{e.package_path}' is empty.\n"
        "Set a title or remove the PRODUCT_TITLE override."
    ),
    MissingTitleError: lambda e: (
        f"No product title for package '{e.package_path}': {e.detail}.\n"
        "Add info.title to the API document or declare a PRODUCT_TITLE override."
    ),
    OverridesNotLoadedError: lambda e: (
        f"Internal error: overrides for package '{e.package_path}' were not loaded."
    ),
    ValidationError: lambda e: f"Invalid configuration: {e}",
    FileNotFoundError: lambda e: str(e),
    ValueError: lambda e: str(e),
    PermissionError: lambda e: f"Permission denied: {e!s}\nCheck file permissions.",
    OSError: lambda e: f"System error: {e!s}",
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
