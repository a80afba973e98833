"""Business group resolution - turns user input into a full group ID.

A user may type a short ID (or any prefix of it) or a group's label:
- The short-ID prefix match is tried first and wins outright when unique
- The exact label match is tried next on a fresh snapshot
- When neither is unique, the pair of outcomes selects one of four errors
"""

import logging

from ..core.exceptions import (
    ResolutionError,
    ResolutionInvariantError,
    resolution_error_for,
)
from ..core.models import MatchOutcome
from ..core.types import MatchStatus, ResolutionErrorKind, ResourceType
from ..providers.directory import BusinessGroupDirectory, GroupDirectory
from .matchers import match_by_label, match_by_short_id

logger = logging.getLogger(__name__)


_FAILURE_KINDS: dict[tuple[MatchStatus, MatchStatus], ResolutionErrorKind] = {
    (MatchStatus.NOT_FOUND, MatchStatus.NOT_FOUND): ResolutionErrorKind.NO_ELEMENTS_FOUND,
    (MatchStatus.NON_UNIQUE, MatchStatus.NON_UNIQUE): ResolutionErrorKind.NON_UNIQUE_ID,
    (MatchStatus.NON_UNIQUE, MatchStatus.NOT_FOUND): (
        ResolutionErrorKind.NON_UNIQUE_ID_AND_NO_ELEMENTS_WITH_NAME
    ),
    (MatchStatus.NOT_FOUND, MatchStatus.NON_UNIQUE): (
        ResolutionErrorKind.NOT_FOUND_ID_AND_DUPLICATE_NAME
    ),
}


def classify_failure(
    id_outcome: MatchOutcome,
    label_outcome: MatchOutcome,
    token: str,
    resource_type: ResourceType = ResourceType.BUSINESS_GROUP,
) -> ResolutionError:
    """
    Map a pair of non-unique outcomes to the matching ResolutionError.

    Args:
        id_outcome: Outcome of the short-ID prefix match
        label_outcome: Outcome of the label match
        token: The user input, carried into the error
        resource_type: Resource type named in the error message

    Raises:
        ResolutionInvariantError: If either outcome is UNIQUE
    """
    kind = _FAILURE_KINDS.get((id_outcome.status, label_outcome.status))
    if kind is None:
        raise ResolutionInvariantError(
            f"Cannot classify resolution failure for {token!r}: "
            f"id={id_outcome.status.value}, label={label_outcome.status.value}"
        )
    return resolution_error_for(kind, token, resource_type)


class BusinessGroupResolver:
    """Resolves short IDs and labels to full business group IDs."""

    RESOURCE_TYPE = ResourceType.BUSINESS_GROUP

    def __init__(self, directory: GroupDirectory | None = None):
        """
        Initialize the resolver.

        Args:
            directory: Snapshot source (defaults to the Admiral directory
                       built from the global config)
        """
        self.directory = directory or BusinessGroupDirectory()

    def resolve_id(self, token: str) -> str:
        """
        Resolve a short ID prefix or a label to a full business group ID.

        Args:
            token: Short ID, prefix of one, or exact label

        Returns:
            The full ID of the single matching group

        Raises:
            ResolutionError: If neither strategy yields exactly one group
            DataSourceError: If a snapshot cannot be fetched
        """
        logger.info(f"Resolving {self.RESOURCE_TYPE.display_name}: {token}")

        id_outcome = match_by_short_id(token, self.directory.fetch())
        logger.debug(f"Short ID match for {token!r}: {id_outcome.status.value}")
        if id_outcome.is_unique:
            return id_outcome.entity.full_id

        label_outcome = match_by_label(token, self.directory.fetch())
        logger.debug(f"Label match for {token!r}: {label_outcome.status.value}")
        if label_outcome.is_unique:
            return label_outcome.entity.full_id

        error = classify_failure(id_outcome, label_outcome, token, self.RESOURCE_TYPE)
        logger.warning(error.message)
        raise error

    def name_of(self, token: str) -> str:
        """
        Return the label of the group ``token`` resolves to.

        Resolution errors propagate. Returns an empty string if the
        resolved group is gone from the fresh snapshot.
        """
        full_id = self.resolve_id(token)
        for group in self.directory.fetch():
            if group.full_id == full_id:
                return group.label
        logger.debug(f"Resolved ID {full_id} missing from latest snapshot")
        return ""


def get_full_id(token: str) -> str:
    """Resolve ``token`` against the directory from the global config."""
    return BusinessGroupResolver().resolve_id(token)


def get_business_group_name(token: str) -> str:
    """Return the label for ``token`` using the global config."""
    return BusinessGroupResolver().name_of(token)
