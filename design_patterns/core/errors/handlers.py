from typing import Any

from design_patterns.core.errors.exceptions import (
    CoreException,
    InitializationFailure,
    InvalidOptionException,
    RenderFailure,
    UnknownProviderException,
)

ERROR_TYPES: dict[type[CoreException], str] = {
    InitializationFailure: "Initialization failure",
    RenderFailure: "Render failure",
    UnknownProviderException: "Unknown provider",
    InvalidOptionException: "Invalid option",
}


def error_type_for(exc: CoreException) -> str:
    for exc_type in type(exc).__mro__:
        if exc_type in ERROR_TYPES:
            return ERROR_TYPES[exc_type]  # type: ignore[index]
    return "Core error"


def format_error_response(error_type: str, message: str | None) -> dict[str, Any]:
    """
    Format error content for reporting to the caller

    Args:
        error_type: Type of error (e.g., "Render failure", "Unknown provider")
        message: Detailed error message

    Returns:
        Dictionary with error information
    """
    return {
        "error": error_type,
        "message": message or "No additional details available",
    }


def format_log_message(
    error_type: str,
    message: str | None,
    additional_info: dict[str, Any] | None = None,
) -> str:
    """
    Format error message for logging

    Args:
        error_type: Type of error
        message: Error message
        additional_info: Additional context information for logs only

    Returns:
        Formatted log message
    """
    # Normalize message text and length
    raw_msg = message or "No additional details available"
    msg = " ".join(raw_msg.split())
    if len(msg) > 500:
        msg = msg[:497] + "..."

    # Safely capitalize an error type
    et = (error_type or "").strip()
    err = (et[:1].upper() + et[1:]) if et else "Error"

    log_msg = f"[{err}] {msg}"

    if additional_info:
        additional_str = ", ".join(
            f"{k}={additional_info[k]!r}" for k in sorted(additional_info)
        )
        log_msg = f"{log_msg} | Additional info: {additional_str}"

    return log_msg
