"""
Unit tests for the filter predicate builder.
"""

import itertools

import pytest

from app.domain.criteria import OwnerCriteria, SpecialtyFilter, VetCriteria
from app.domain.entities import Owner, Vet
from app.services.predicates import (
    AllOf,
    Always,
    Contains,
    Equals,
    HasNoSpecialties,
    HasSpecialty,
    Never,
    StartsWith,
    all_of,
    build_owner_predicate,
    build_vet_predicate,
)

KNOWN = ["radiology", "surgery", "dentistry"]


def _owner(last_name, city="Madison", telephone="6085551023"):
    return Owner(id=1, first_name="Test", last_name=last_name, city=city, telephone=telephone)


@pytest.mark.unit
class TestPrimitivePredicates:
    def test_contains_is_unanchored(self):
        predicate = Contains("last_name", "avi")

        assert predicate(_owner("Davis"))
        assert not predicate(_owner("Black"))

    def test_contains_case_insensitive_by_default(self):
        assert Contains("last_name", "davis")(_owner("Davis"))

    def test_contains_case_sensitive(self):
        predicate = Contains("last_name", "davis", case_sensitive=True)

        assert not predicate(_owner("Davis"))
        assert predicate(_owner("Mcdavis"))

    def test_starts_with_is_anchored(self):
        predicate = StartsWith("last_name", "Da")

        assert predicate(_owner("Davis"))
        assert not predicate(_owner("McDavis"))

    def test_equals_requires_full_value(self):
        predicate = Equals("telephone", "608555")

        assert not predicate(_owner("Davis", telephone="6085551023"))
        assert predicate(_owner("Davis", telephone="608555"))

    def test_specialty_predicates(self):
        douglas = Vet(id=3, first_name="Linda", last_name="Douglas", specialties=("surgery", "dentistry"))
        carter = Vet(id=1, first_name="James", last_name="Carter")

        assert HasSpecialty("Dentistry")(douglas)
        assert not HasSpecialty("radiology")(douglas)
        assert HasNoSpecialties()(carter)
        assert not HasNoSpecialties()(douglas)

    def test_always_and_never(self):
        assert Always()(_owner("X"))
        assert not Never()(_owner("X"))


@pytest.mark.unit
class TestConjunction:
    def test_all_of_drops_identity_parts(self):
        contains = Contains("last_name", "a")
        assert all_of([Always(), contains, Always()]) == contains

    def test_all_of_empty_is_identity(self):
        assert all_of([]) == Always()

    def test_all_of_short_circuits_on_never(self):
        assert all_of([Contains("last_name", "a"), Never()]) == Never()

    def test_nested_conjunctions_are_flattened(self):
        a, b, c = Contains("last_name", "a"), Equals("city", "x"), Equals("telephone", "1")
        combined = (a & b) & c

        assert combined == AllOf((a, b, c))

    @pytest.mark.parametrize(
        "first, second",
        list(
            itertools.product(
                [Contains("last_name", "a"), Equals("city", "Madison", False), Always(), Never()],
                [Equals("telephone", "6085551023"), Contains("last_name", "vis"), Always()],
            )
        ),
    )
    def test_and_matches_both_sides(self, seed_owners, first, second):
        combined = first & second
        for owner in seed_owners:
            assert combined(owner) == (first(owner) and second(owner))


@pytest.mark.unit
@pytest.mark.owners
class TestBuildOwnerPredicate:
    def test_empty_criteria_matches_everything(self, seed_owners):
        predicate = build_owner_predicate(OwnerCriteria())

        assert predicate == Always()
        assert all(predicate(o) for o in seed_owners)

    def test_last_name_substring(self, seed_owners):
        predicate = build_owner_predicate(OwnerCriteria(last_name="davis"), case_sensitive=False)
        names = sorted(o.full_name for o in seed_owners if predicate(o))

        assert names == ["Betty Davis", "Harold Davis"]

    def test_city_is_exact_not_substring(self, seed_owners):
        predicate = build_owner_predicate(OwnerCriteria(city="madison"), case_sensitive=False)
        matched = [o for o in seed_owners if predicate(o)]

        assert len(matched) == 4
        assert all(o.city == "Madison" for o in matched)
        assert not build_owner_predicate(OwnerCriteria(city="Madis"))(seed_owners[0])

    def test_telephone_exact(self, seed_owners):
        predicate = build_owner_predicate(OwnerCriteria(telephone="6085551749"))
        assert [o.full_name for o in seed_owners if predicate(o)] == ["Betty Davis"]

    def test_combined_criteria_are_anded(self, seed_owners):
        predicate = build_owner_predicate(
            OwnerCriteria(last_name="Davis", city="Windsor"), case_sensitive=False
        )
        assert [o.full_name for o in seed_owners if predicate(o)] == ["Harold Davis"]

    def test_case_sensitivity_follows_config(self, monkeypatch, seed_owners):
        from app.core import config

        monkeypatch.setattr(config, "SEARCH_CASE_SENSITIVE", True)
        predicate = build_owner_predicate(OwnerCriteria(last_name="davis"))

        assert not any(predicate(o) for o in seed_owners)


@pytest.mark.unit
@pytest.mark.vets
class TestBuildVetPredicate:
    def test_any_specialty_matches_every_vet(self, seed_vets):
        predicate = build_vet_predicate(VetCriteria(), KNOWN)
        assert all(predicate(v) for v in seed_vets)

    def test_unknown_specialty_matches_nothing(self, seed_vets):
        predicate = build_vet_predicate(VetCriteria(specialty=SpecialtyFilter.named("cardiology")), KNOWN)

        assert predicate == Never()
        assert not any(predicate(v) for v in seed_vets)

    def test_last_name_prefix_and_specialty(self, seed_vets):
        predicate = build_vet_predicate(
            VetCriteria(last_name="s", specialty=SpecialtyFilter.named("RADIOLOGY")),
            KNOWN,
            case_sensitive=False,
        )
        assert [v.last_name for v in seed_vets if predicate(v)] == ["Stevens"]
