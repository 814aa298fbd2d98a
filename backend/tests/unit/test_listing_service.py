"""
Unit tests for the owner and vet listing services against in-memory collections.
"""

from unittest.mock import Mock

import pytest

from app.domain.interfaces import IOwnerReader
from app.domain.paging import Redirect, ShowListing
from app.services.listing_service import OwnerListingService, VetListingService


@pytest.fixture
def vet_service(vet_reader):
    return VetListingService(vet_reader, case_sensitive=False)


@pytest.mark.unit
@pytest.mark.services
@pytest.mark.vets
class TestVetListingService:
    """Specialty scenarios against the clinic's six vets."""

    @pytest.mark.parametrize(
        "specialty, expected",
        [
            ("radiology", ["Leary", "Stevens"]),
            ("surgery", ["Douglas", "Ortega"]),
            ("none", ["Carter", "Jenkins"]),
            ("Radiology", ["Leary", "Stevens"]),
        ],
    )
    def test_specialty_listing(self, vet_service, specialty, expected):
        outcome = vet_service.resolve({"specialty": specialty})

        assert isinstance(outcome.decision, ShowListing)
        assert outcome.decision.page_result.total_matching == 2
        assert [v.last_name for v in outcome.decision.page_result.items] == expected

    def test_single_specialty_holder_redirects(self, vet_service):
        outcome = vet_service.resolve({"specialty": "dentistry"})

        assert outcome.is_redirect
        assert outcome.decision == Redirect(3)

    def test_unknown_specialty_is_not_found_not_error(self, vet_service):
        outcome = vet_service.resolve({"specialty": "cardiology"})

        assert outcome.is_valid
        assert outcome.listing.not_found
        assert outcome.listing.params == {"specialty": "cardiology"}

    def test_unfiltered_listing_pages_six_vets(self, vet_service):
        first = vet_service.resolve({})
        second = vet_service.resolve({"page": "2"})

        assert len(first.listing.page_result.items) == 5
        assert [v.last_name for v in second.listing.page_result.items] == ["Stevens"]

    def test_bad_page_falls_back_to_first(self, vet_service):
        outcome = vet_service.resolve({"page": "abc"})
        assert outcome.listing.page_result.page_number == 1

    def test_specialty_options_follow_last_name_filter(self, vet_service):
        outcome = vet_service.resolve({"lastName": "D"})

        assert outcome.is_redirect
        assert outcome.specialty_options == ["dentistry", "surgery"]

    def test_specialty_options_without_filter_are_all_known(self, vet_service):
        outcome = vet_service.resolve({})
        assert outcome.specialty_options == ["dentistry", "radiology", "surgery"]


@pytest.mark.unit
@pytest.mark.services
@pytest.mark.owners
class TestOwnerListingService:
    def test_davis_split_across_two_pages(self, davis_owner_reader):
        service = OwnerListingService(davis_owner_reader, case_sensitive=False)

        first = service.resolve({"lastName": "Davis"})
        second = service.resolve({"lastName": "Davis", "page": "2"})

        assert len(first.listing.page_result.items) == 5
        assert len(second.listing.page_result.items) == 3
        for outcome in (first, second):
            assert outcome.listing.page_result.total_matching == 8
            for number in outcome.listing.page_numbers:
                assert outcome.listing.params_for_page(number)["lastName"] == "Davis"

    def test_single_match_redirects_even_on_later_page(self, owner_reader):
        service = OwnerListingService(owner_reader)
        outcome = service.resolve({"lastName": "Franklin", "page": "3"})

        assert outcome.decision == Redirect(1)

    def test_zero_matches_is_not_found(self, owner_reader):
        outcome = OwnerListingService(owner_reader).resolve({"lastName": "Nobody"})

        assert outcome.is_valid
        assert outcome.listing.not_found

    def test_invalid_telephone_never_reaches_the_collection(self):
        reader = Mock(spec=IOwnerReader)
        service = OwnerListingService(reader)

        outcome = service.resolve({"telephone": "abc-invalid", "lastName": "Davis"})

        assert not outcome.is_valid
        assert outcome.decision is None
        assert outcome.errors == {"telephone": "Telephone must contain only numeric characters"}
        assert outcome.form_values == {"telephone": "abc-invalid", "lastName": "Davis"}
        reader.count.assert_not_called()
        reader.page.assert_not_called()

    def test_resolution_is_idempotent(self, owner_reader):
        service = OwnerListingService(owner_reader)
        args = {"city": "Madison", "page": "1"}

        assert service.resolve(args).decision == service.resolve(args).decision

    def test_empty_search_lists_everyone(self, owner_reader):
        outcome = OwnerListingService(owner_reader).resolve({"lastName": ""})

        assert outcome.listing.page_result.total_matching == 10
        assert outcome.listing.params == {}
