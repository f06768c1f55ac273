"""
Unit Tests for the view pipeline.

Test Aspects Covered:
    ✅ Business Logic: Filter then sort, documented scenarios
    ✅ Invariants: shown <= total, dataset untouched, idempotent search
"""

from __future__ import annotations

import pytest

from progress_tracker.domain.entities import SortOption, StatusFilter
from progress_tracker.domain.value_objects import ViewState
from progress_tracker.pipeline.view_pipeline import ViewPipeline, derive_view


class TestDeriveView:
    """Test cases for derive_view."""

    def test_badges_desc_scenario(self, alice_bob_dataset) -> None:
        """
        SCENARIO: Bob (2 badges) and Alice (5 badges), filter all
        EXPECTED: Alice first
        """
        # Act
        result = derive_view(alice_bob_dataset, "", "all", "badges-desc")

        # Assert
        assert result.names == ("Alice", "Bob")

    def test_name_asc_scenario(self, alice_bob_dataset) -> None:
        result = derive_view(alice_bob_dataset, sort_option=SortOption.NAME_ASC)

        assert result.names == ("Alice", "Bob")

    @pytest.mark.parametrize("option", list(SortOption))
    def test_pending_filter_scenario(self, alice_bob_dataset, option) -> None:
        """
        SCENARIO: Filter pending under every sort option
        EXPECTED: Only Bob remains
        """
        result = derive_view(alice_bob_dataset, status_filter="pending", sort_option=option)

        assert result.names == ("Bob",)

    def test_unmatched_search_gives_empty_view(self, sample_dataset) -> None:
        result = derive_view(sample_dataset, search_text="zzz")

        assert result.is_empty
        assert result.shown == 0
        assert result.total == len(sample_dataset)

    def test_search_and_status_combine(self, sample_dataset) -> None:
        """
        SCENARIO: Search matching every email, status completed
        EXPECTED: Only the exact "Yes" record passes
        """
        result = derive_view(sample_dataset, search_text="@EXAMPLE", status_filter="completed")

        assert result.names == ("Ana Gomez",)

    def test_default_order_on_sample(self, sample_dataset) -> None:
        result = derive_view(sample_dataset)

        assert result.names == ("Ana Gomez", "Dana Kapoor", "Bob Martin", "Chen Wei")

    def test_repeated_search_is_idempotent(self, sample_dataset) -> None:
        first = derive_view(sample_dataset, search_text="an")
        second = derive_view(sample_dataset, search_text="an")

        assert first == second
        assert first.names == ("Ana Gomez", "Dana Kapoor")

    @pytest.mark.parametrize("status", list(StatusFilter))
    @pytest.mark.parametrize("search", ["", "a", "chen", "zzz"])
    def test_shown_never_exceeds_total(self, sample_dataset, status, search) -> None:
        result = derive_view(sample_dataset, search_text=search, status_filter=status)

        assert result.shown <= result.total == len(sample_dataset)

    def test_dataset_not_mutated(self, sample_dataset) -> None:
        before = list(sample_dataset)

        derive_view(sample_dataset, sort_option="name-desc")

        assert list(sample_dataset) == before

    def test_empty_dataset(self) -> None:
        result = derive_view((), search_text="a", status_filter="completed")

        assert result.records == ()
        assert result.total == 0

    def test_invalid_controls_raise(self, sample_dataset) -> None:
        with pytest.raises(ValueError):
            derive_view(sample_dataset, status_filter="done")
        with pytest.raises(ValueError):
            derive_view(sample_dataset, sort_option="badges")


class TestViewPipeline:
    """Test cases for ViewPipeline."""

    def test_default_state(self, alice_bob_dataset) -> None:
        result = ViewPipeline().derive(alice_bob_dataset)

        assert result.names == ("Alice", "Bob")

    def test_uses_given_state(self, alice_bob_dataset) -> None:
        state = ViewState(search_text="B@X", status_filter=StatusFilter.ALL)

        result = ViewPipeline().derive(alice_bob_dataset, state)

        assert result.names == ("Bob",)
