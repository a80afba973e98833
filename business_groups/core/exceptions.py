"""Custom exceptions for the business group resolver."""

from .types import ResolutionErrorKind, ResourceType


class BusinessGroupError(Exception):
    """Base exception for all business group tool errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DataSourceError(BusinessGroupError):
    """Raised when the remote directory fails or returns invalid data."""

    def __init__(
        self,
        source: str,
        message: str,
        endpoint: str | None = None,
        status_code: int | None = None,
    ):
        full_message = f"[{source}] {message}"
        super().__init__(
            full_message,
            {
                "source": source,
                "endpoint": endpoint,
                "status_code": status_code,
            },
        )
        self.source = source
        self.endpoint = endpoint
        self.status_code = status_code


class ConfigurationError(BusinessGroupError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key


class ResolutionError(BusinessGroupError):
    """Raised when a token cannot be resolved to exactly one resource.

    Subclasses fix ``kind``; use :func:`resolution_error_for` to build the
    right one from a kind.
    """

    kind: ResolutionErrorKind

    def __init__(
        self,
        token: str,
        resource_type: ResourceType = ResourceType.BUSINESS_GROUP,
    ):
        message = self.kind.render(token, resource_type)
        super().__init__(
            message,
            {
                "kind": self.kind.value,
                "token": token,
                "resource_type": resource_type.value,
            },
        )
        self.token = token
        self.resource_type = resource_type


class NoElementsFoundError(ResolutionError):
    """No short ID starts with the token and no label equals it."""

    kind = ResolutionErrorKind.NO_ELEMENTS_FOUND


class NonUniqueIdError(ResolutionError):
    """The token prefixes several short IDs and equals several labels."""

    kind = ResolutionErrorKind.NON_UNIQUE_ID


class NonUniqueIdAndNoElementsWithNameError(ResolutionError):
    """The token prefixes several short IDs and equals no label."""

    kind = ResolutionErrorKind.NON_UNIQUE_ID_AND_NO_ELEMENTS_WITH_NAME


class NotFoundIdAndDuplicateNameError(ResolutionError):
    """The token prefixes no short ID and equals several labels."""

    kind = ResolutionErrorKind.NOT_FOUND_ID_AND_DUPLICATE_NAME


_ERRORS_BY_KIND: dict[ResolutionErrorKind, type[ResolutionError]] = {
    cls.kind: cls
    for cls in (
        NoElementsFoundError,
        NonUniqueIdError,
        NonUniqueIdAndNoElementsWithNameError,
        NotFoundIdAndDuplicateNameError,
    )
}


def resolution_error_for(
    kind: ResolutionErrorKind,
    token: str,
    resource_type: ResourceType = ResourceType.BUSINESS_GROUP,
) -> ResolutionError:
    """Build the ResolutionError subclass matching ``kind``."""
    return _ERRORS_BY_KIND[kind](token, resource_type)


class ResolutionInvariantError(RuntimeError):
    """Raised when the failure classifier sees a pair it cannot classify.

    This signals a defect in the resolver, not a user input problem.
    """
