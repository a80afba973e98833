"""Type definitions and enums for the business group resolver."""

from enum import Enum


class ResourceType(str, Enum):
    """Resource types a token can be resolved against."""

    BUSINESS_GROUP = "business_group"

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        names = {
            ResourceType.BUSINESS_GROUP: "business group",
        }
        return names.get(self, self.value)


class DataSource(str, Enum):
    """Data source identifiers."""

    ADMIRAL = "admiral"
    UNKNOWN = "unknown"


class MatchStatus(str, Enum):
    """Outcome of a single matching strategy over a snapshot."""

    UNIQUE = "unique"
    NOT_FOUND = "not_found"
    NON_UNIQUE = "non_unique"


class ResolutionErrorKind(str, Enum):
    """The four ways a token can fail to resolve."""

    NO_ELEMENTS_FOUND = "no_elements_found"
    NON_UNIQUE_ID = "non_unique_id"
    NON_UNIQUE_ID_AND_NO_ELEMENTS_WITH_NAME = "non_unique_id_and_no_elements_with_name"
    NOT_FOUND_ID_AND_DUPLICATE_NAME = "not_found_id_and_duplicate_name"

    @property
    def template(self) -> str:
        """Message template with ``{resource}`` and ``{token}`` fields."""
        templates = {
            ResolutionErrorKind.NO_ELEMENTS_FOUND: 'No {resource} found with ID or name "{token}".',
            ResolutionErrorKind.NON_UNIQUE_ID: (
                'Non-unique {resource} ID and name "{token}". '
                "Provide more characters of the ID."
            ),
            ResolutionErrorKind.NON_UNIQUE_ID_AND_NO_ELEMENTS_WITH_NAME: (
                'Non-unique {resource} ID "{token}" and no {resource} with this name. '
                "Provide more characters of the ID."
            ),
            ResolutionErrorKind.NOT_FOUND_ID_AND_DUPLICATE_NAME: (
                'No {resource} found with ID "{token}" and more than one '
                "{resource} has this name. Use the ID instead."
            ),
        }
        return templates[self]

    def render(self, token: str, resource_type: ResourceType) -> str:
        """Fill the template for a token and resource type."""
        return self.template.format(resource=resource_type.display_name, token=token)
