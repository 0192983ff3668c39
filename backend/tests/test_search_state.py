"""Tests for the search screen reducer."""

import pytest

from bloodlink.errors import PageOutOfRange
from bloodlink.models.blood_group import BloodGroup
from bloodlink.models.search import MatchMode
from bloodlink.screens.search_state import (
    GoToPage,
    NextPage,
    PreviousPage,
    Reset,
    SetBloodGroup,
    SetError,
    SetLoading,
    SetLocation,
    SetMatchMode,
    SetQuery,
    SetResults,
    initial_search_state,
    transition,
)
from bloodlink.seed import home_roster


@pytest.fixture
def state():
    return initial_search_state(home_roster(), page_size=6, empty_message="Nothing here.")


class TestInitialState:
    def test_shows_whole_roster_on_first_page(self, state) -> None:
        assert state.results == state.roster
        assert state.page == 1
        assert state.total_pages == 4
        assert len(state.visible_page().items) == 6


class TestCriteriaResetPage:
    @pytest.mark.parametrize(
        "action",
        [
            SetQuery("jo"),
            SetBloodGroup(BloodGroup.O_NEGATIVE),
            SetLocation("Dhaka"),
            SetMatchMode(MatchMode.EXACT),
        ],
    )
    def test_changing_criteria_returns_to_page_one(self, state, action) -> None:
        """Should go back to page 1 even if the old page would still exist."""
        on_page_three = transition(state, GoToPage(3))
        assert transition(on_page_three, action).page == 1

    def test_results_reset_page(self, state) -> None:
        on_page_two = transition(state, GoToPage(2))
        assert transition(on_page_two, SetResults(state.roster)).page == 1

    def test_blank_location_clears_filter(self, state) -> None:
        assert transition(state, SetLocation("")).location is None


class TestResults:
    def test_empty_results_set_no_results_message(self, state) -> None:
        new_state = transition(state, SetResults(()))
        assert new_state.error is None
        assert new_state.no_results
        assert new_state.message == "Nothing here."
        assert new_state.total_pages == 1
        assert new_state.visible_page().items == []

    def test_results_clear_previous_message(self, state) -> None:
        empty = transition(state, SetResults(()))
        refilled = transition(empty, SetResults(state.roster[:2]))
        assert refilled.message is None
        assert not refilled.no_results

    def test_failure_is_not_no_results(self, state) -> None:
        """Should keep a load failure apart from an empty result set."""
        failed = transition(transition(state, SetResults(())), SetError("Unable to load donors."))
        assert failed.error == "Unable to load donors."
        assert not failed.no_results
        assert failed.message is None

    def test_loading_is_not_no_results(self, state) -> None:
        loading = transition(transition(state, SetResults(())), SetLoading(True))
        assert not loading.no_results


class TestPaging:
    def test_next_and_previous(self, state) -> None:
        state = transition(state, NextPage())
        assert state.page == 2
        assert [donor.id for donor in state.visible_page().items] == ["7", "8", "9", "10", "11", "12"]
        assert transition(state, PreviousPage()).page == 1

    def test_previous_on_first_page_is_noop(self, state) -> None:
        assert transition(state, PreviousPage()) is state

    def test_next_on_last_page_is_noop(self, state) -> None:
        last = transition(state, GoToPage(4))
        assert transition(last, NextPage()) is last

    @pytest.mark.parametrize("page", [0, 5, -2])
    def test_go_to_page_out_of_range_raises(self, state, page: int) -> None:
        with pytest.raises(PageOutOfRange):
            transition(state, GoToPage(page))


class TestReset:
    def test_reset_restores_roster_and_clears_criteria(self, state) -> None:
        state = transition(state, SetQuery("khan"))
        state = transition(state, SetBloodGroup(BloodGroup.AB_NEGATIVE))
        state = transition(state, SetResults(state.roster[:1]))
        state = transition(state, SetError("boom"))
        reset = transition(state, Reset())
        assert reset.query == ""
        assert reset.blood_group is None
        assert reset.results == reset.roster
        assert reset.error is None
        assert reset.page == 1
        assert reset.empty_message == "Nothing here."

    def test_unknown_action_raises(self, state) -> None:
        with pytest.raises(TypeError):
            transition(state, object())  # type: ignore[arg-type]


class TestImmutability:
    def test_transition_returns_new_state(self, state) -> None:
        new_state = transition(state, SetQuery("x"))
        assert new_state is not state
        assert state.query == ""
