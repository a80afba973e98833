"""Core module - data models, types, config and exceptions."""

from .models import (
    AuditEntry,
    BusinessGroup,
    Identifiable,
    MatchOutcome,
    get_resource_id,
)
from .types import (
    DataSource,
    MatchStatus,
    ResolutionErrorKind,
    ResourceType,
)
from .exceptions import (
    BusinessGroupError,
    ConfigurationError,
    DataSourceError,
    NoElementsFoundError,
    NonUniqueIdAndNoElementsWithNameError,
    NonUniqueIdError,
    NotFoundIdAndDuplicateNameError,
    ResolutionError,
    ResolutionInvariantError,
    resolution_error_for,
)
from .config import APIConfig, get_config, reload_config

__all__ = [
    # Models
    "AuditEntry",
    "BusinessGroup",
    "Identifiable",
    "MatchOutcome",
    "get_resource_id",
    # Types
    "DataSource",
    "MatchStatus",
    "ResolutionErrorKind",
    "ResourceType",
    # Exceptions
    "BusinessGroupError",
    "ConfigurationError",
    "DataSourceError",
    "NoElementsFoundError",
    "NonUniqueIdAndNoElementsWithNameError",
    "NonUniqueIdError",
    "NotFoundIdAndDuplicateNameError",
    "ResolutionError",
    "ResolutionInvariantError",
    "resolution_error_for",
    # Config
    "APIConfig",
    "get_config",
    "reload_config",
]
