"""Tests for the donor filter and search engine."""

from bloodlink.matching.search import search
from bloodlink.models.blood_group import BloodGroup
from bloodlink.models.donor import Donor
from bloodlink.models.search import FilterCriteria, MatchMode
from bloodlink.seed import emergency_roster, home_roster


class TestTextClause:
    def test_query_matches_name_case_insensitively(self, two_donor_roster) -> None:
        result = search(two_donor_roster, FilterCriteria(query="john"))
        assert [donor.name for donor in result] == ["John Doe"]

    def test_query_matches_location(self, two_donor_roster) -> None:
        result = search(two_donor_roster, FilterCriteria(query="CHITTA"))
        assert [donor.name for donor in result] == ["Jane Smith"]

    def test_whitespace_query_is_ignored(self, two_donor_roster) -> None:
        assert search(two_donor_roster, FilterCriteria(query="   ")) == two_donor_roster

    def test_query_is_trimmed(self, two_donor_roster) -> None:
        result = search(two_donor_roster, FilterCriteria(query="  doe "))
        assert [donor.id for donor in result] == ["1"]


class TestBloodGroupClause:
    def test_universal_donor_search_returns_all_groups(self, all_groups_roster) -> None:
        result = search(all_groups_roster, FilterCriteria(blood_group=BloodGroup.O_NEGATIVE))
        assert {donor.blood_group for donor in result} == set(BloodGroup)

    def test_ab_positive_returns_only_ab_positive(self, all_groups_roster) -> None:
        result = search(all_groups_roster, FilterCriteria(blood_group="AB+"))
        assert [donor.blood_group for donor in result] == [BloodGroup.AB_POSITIVE]

    def test_compatibility_not_equality(self, all_groups_roster) -> None:
        result = search(all_groups_roster, FilterCriteria(blood_group="A-"))
        assert [donor.blood_group.value for donor in result] == ["A+", "A-", "AB+", "AB-"]

    def test_exact_mode_uses_equality(self, all_groups_roster) -> None:
        criteria = FilterCriteria(blood_group="O-", match_mode=MatchMode.EXACT)
        result = search(all_groups_roster, criteria)
        assert [donor.blood_group for donor in result] == [BloodGroup.O_NEGATIVE]


class TestLocationClause:
    def test_location_is_exact(self) -> None:
        roster = emergency_roster()
        result = search(roster, FilterCriteria(location="Zajira"))
        assert [donor.name for donor in result] == ["Jane Smith"]

    def test_location_is_case_sensitive(self) -> None:
        assert search(emergency_roster(), FilterCriteria(location="zajira")) == []

    def test_location_has_no_partial_match(self) -> None:
        assert search(emergency_roster(), FilterCriteria(location="Shariatpur")) == []


class TestComposition:
    def test_unset_criteria_is_identity(self) -> None:
        roster = home_roster()
        assert search(roster, FilterCriteria()) == roster

    def test_clauses_are_anded(self) -> None:
        criteria = FilterCriteria(query="khan", blood_group="O-", location="Sylhet")
        result = search(home_roster(), criteria)
        assert [donor.name for donor in result] == ["Rahim Khan"]

    def test_roster_order_is_preserved(self) -> None:
        result = search(home_roster(), FilterCriteria(location="Dhaka"))
        assert [donor.id for donor in result] == ["1", "9", "17"]

    def test_empty_roster_returns_empty(self) -> None:
        assert search([], FilterCriteria(query="anyone", blood_group="A+")) == []

    def test_no_match_is_empty_not_error(self) -> None:
        assert search(home_roster(), FilterCriteria(query="nobody-here")) == []

    def test_refiltering_union_reproduces_result(self) -> None:
        """Filtering a union of a result with extra rows by the same criteria gives the same result."""
        roster = home_roster()
        criteria = FilterCriteria(query="a", blood_group="B-")
        first = search(roster, criteria)
        extra = [Donor(id="x", name="Zed", blood_group=BloodGroup.O_NEGATIVE, location="Nowhere")]
        assert search(first + extra, criteria) == first
        assert search(first, criteria) == first
