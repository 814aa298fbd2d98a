"""
Unit tests for navigation resolution and the listing link parameters.
"""

from unittest.mock import Mock

import pytest

from app.domain.entities import Owner
from app.domain.paging import PageResult, Redirect, ShowListing
from app.services.navigation import resolve_navigation


def _owners(*ids):
    return tuple(Owner(id=i, first_name="F", last_name=f"L{i}") for i in ids)


@pytest.mark.unit
@pytest.mark.navigation
class TestResolveNavigation:
    def test_zero_matches_is_not_found_listing(self):
        decision = resolve_navigation(PageResult((), 0, 1), {"lastName": "Zed"})

        assert isinstance(decision, ShowListing)
        assert decision.not_found
        assert decision.page_result.is_empty
        assert decision.params == {"lastName": "Zed"}

    def test_single_match_redirects(self):
        decision = resolve_navigation(PageResult(_owners(7), 1, 1))
        assert decision == Redirect(7)

    def test_single_match_redirects_from_any_page(self):
        fetch_first = Mock(return_value=PageResult(_owners(7), 1, 1))

        decision = resolve_navigation(PageResult((), 1, 3), {"city": "Monona"}, fetch_first=fetch_first)

        assert decision == Redirect(7)
        fetch_first.assert_called_once_with()

    def test_single_match_off_page_without_loader_fails_loudly(self):
        with pytest.raises(ValueError):
            resolve_navigation(PageResult((), 1, 3))

    def test_many_matches_show_requested_page(self):
        page = PageResult(_owners(6, 7, 8), 8, 2)
        decision = resolve_navigation(page, {"lastName": "Davis"})

        assert isinstance(decision, ShowListing)
        assert not decision.not_found
        assert decision.page_result is page

    def test_many_matches_on_empty_page_still_list(self):
        decision = resolve_navigation(PageResult((), 8, 5), {"lastName": "Davis"})

        assert isinstance(decision, ShowListing)
        assert not decision.not_found

    def test_resolution_is_idempotent(self):
        page = PageResult(_owners(1, 2, 3, 4, 5), 8, 1)

        assert resolve_navigation(page, {"lastName": "Davis"}) == resolve_navigation(
            page, {"lastName": "Davis"}
        )


@pytest.mark.unit
@pytest.mark.navigation
class TestListingLinks:
    @pytest.fixture
    def listing(self):
        return resolve_navigation(
            PageResult(_owners(1, 2, 3, 4, 5), 8, 1),
            {"lastName": "Davis", "city": "Madison", "page": "1"},
        )

    def test_page_param_is_not_a_preserved_filter(self, listing):
        assert listing.params == {"lastName": "Davis", "city": "Madison"}

    def test_every_page_link_keeps_every_filter(self, listing):
        for number in list(listing.page_numbers) + [listing.next_page, listing.last_page]:
            params = listing.params_for_page(number)
            assert params["lastName"] == "Davis"
            assert params["city"] == "Madison"
            assert params["page"] == str(number)

    def test_moving_to_next_page_does_not_change_filters(self, listing):
        before = listing.params
        after = {k: v for k, v in listing.params_for_page(listing.next_page).items() if k != "page"}
        assert after == before

    def test_clearing_a_filter_omits_the_key(self, listing):
        assert listing.params_without("city") == {"lastName": "Davis"}

    def test_empty_filter_values_are_dropped(self):
        decision = resolve_navigation(PageResult(_owners(1, 2), 2, 1), {"lastName": "", "city": "X"})
        assert decision.params == {"city": "X"}

    def test_prev_next_on_first_and_last_page(self, listing):
        assert listing.previous_page is None
        assert listing.next_page == 2
        assert listing.last_page == 2
        assert list(listing.page_numbers) == [1, 2]
