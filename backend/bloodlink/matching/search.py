from __future__ import annotations

from typing import Callable, Iterable, List

from loguru import logger

from ..models.donor import Donor
from ..models.search import FilterCriteria, MatchMode
from .compatibility import compatible_groups

DonorPredicate = Callable[[Donor], bool]


def _text_clause(query: str) -> DonorPredicate | None:
    needle = query.strip().lower()
    if not needle:
        return None
    return lambda donor: needle in donor.name.lower() or needle in donor.location.lower()


def _blood_group_clause(criteria: FilterCriteria) -> DonorPredicate | None:
    if criteria.blood_group is None:
        return None
    if criteria.match_mode is MatchMode.EXACT:
        wanted = criteria.blood_group
        return lambda donor: donor.blood_group == wanted
    allowed = compatible_groups(criteria.blood_group)
    return lambda donor: donor.blood_group in allowed


def _location_clause(location: str | None) -> DonorPredicate | None:
    if not location:
        return None
    return lambda donor: donor.location == location


def build_predicate(criteria: FilterCriteria) -> DonorPredicate:
    clauses = [
        clause
        for clause in (
            _text_clause(criteria.query),
            _blood_group_clause(criteria),
            _location_clause(criteria.location),
        )
        if clause is not None
    ]
    return lambda donor: all(clause(donor) for clause in clauses)


def search(roster: Iterable[Donor], criteria: FilterCriteria) -> List[Donor]:
    """
    Filter ``roster`` by every active criterion, keeping roster order.

    An empty list is a normal outcome; callers present it as "no results".
    """
    predicate = build_predicate(criteria)
    matches = [donor for donor in roster if predicate(donor)]
    logger.debug(
        "Search q={!r} group={} location={} mode={} -> {} match(es)",
        criteria.query,
        criteria.blood_group,
        criteria.location,
        criteria.match_mode.value,
        len(matches),
    )
    return matches
