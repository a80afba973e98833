"""Tests for core models."""

import pytest
from pydantic import ValidationError

from business_groups.core.models import (
    BusinessGroup,
    Identifiable,
    MatchOutcome,
    get_resource_id,
)
from business_groups.core.types import MatchStatus, ResolutionErrorKind, ResourceType


class TestGetResourceId:
    def test_last_segment(self):
        assert get_resource_id("/resources/groups/xyz") == "xyz"

    def test_trailing_slash(self):
        assert get_resource_id("/resources/groups/xyz/") == "xyz"

    def test_no_slash(self):
        assert get_resource_id("xyz") == "xyz"


class TestBusinessGroup:
    def test_ids(self):
        group = BusinessGroup(id="/resources/groups/xyz", label="Dev")
        assert group.full_id == "/resources/groups/xyz"
        assert group.short_id == "xyz"

    def test_is_identifiable(self):
        assert isinstance(BusinessGroup(id="/g/a"), Identifiable)

    def test_frozen(self):
        group = BusinessGroup(id="/g/a", label="Dev")
        with pytest.raises(ValidationError):
            group.label = "Other"

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            BusinessGroup(id="", label="Dev")


class TestMatchOutcome:
    def test_constructors(self):
        group = BusinessGroup(id="/g/a")
        assert MatchOutcome.unique(group).entity == group
        assert MatchOutcome.not_found().status == MatchStatus.NOT_FOUND
        non_unique = MatchOutcome.non_unique(3)
        assert non_unique.match_count == 3
        assert not non_unique.is_unique


class TestResolutionErrorKind:
    def test_render(self):
        message = ResolutionErrorKind.NO_ELEMENTS_FOUND.render(
            "abc", ResourceType.BUSINESS_GROUP
        )
        assert message == 'No business group found with ID or name "abc".'
