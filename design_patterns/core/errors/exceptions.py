from typing import Any


class CoreException(Exception):
    def __init__(
        self, message: str | None = None, additional_info: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.additional_info = additional_info


class InitializationFailure(CoreException):
    """Raised to every caller of a singleton guard whose factory has failed."""

    pass


class RenderFailure(CoreException):
    """The output sink rejected a write while rendering a node tree."""

    pass


class UnknownProviderException(CoreException):
    pass


class InvalidOptionException(CoreException):
    pass
