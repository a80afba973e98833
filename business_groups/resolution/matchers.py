"""Matching strategies over a business group snapshot.

Both strategies scan the whole snapshot in order, count the matches and keep
the last matching group. Only the count decides the outcome; the kept group
is reported for a UNIQUE outcome and dropped otherwise.
"""

from typing import Callable, Sequence

from ..core.models import BusinessGroup, MatchOutcome


def _scan(
    snapshot: Sequence[BusinessGroup],
    predicate: Callable[[BusinessGroup], bool],
) -> MatchOutcome:
    matched_count = 0
    last_match: BusinessGroup | None = None
    for group in snapshot:
        if not predicate(group):
            continue
        matched_count += 1
        last_match = group

    if matched_count < 1 or last_match is None:
        return MatchOutcome.not_found()
    if matched_count > 1:
        return MatchOutcome.non_unique(matched_count)
    return MatchOutcome.unique(last_match)


def match_by_short_id(token: str, snapshot: Sequence[BusinessGroup]) -> MatchOutcome:
    """Match groups whose short ID starts with ``token`` (case-sensitive)."""
    return _scan(snapshot, lambda group: group.short_id.startswith(token))


def match_by_label(token: str, snapshot: Sequence[BusinessGroup]) -> MatchOutcome:
    """Match groups whose label is exactly ``token``."""
    return _scan(snapshot, lambda group: group.label == token)
