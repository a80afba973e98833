"""Resolution module - resolves user input to business group IDs."""

from .group_resolver import (
    BusinessGroupResolver,
    classify_failure,
    get_business_group_name,
    get_full_id,
)
from .matchers import match_by_label, match_by_short_id

__all__ = [
    "BusinessGroupResolver",
    "classify_failure",
    "get_business_group_name",
    "get_full_id",
    "match_by_label",
    "match_by_short_id",
]
