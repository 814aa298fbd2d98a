"""
Listing services for the owner and vet directories.

Each ``resolve`` call runs one request through the whole read path:
validate → build predicate → execute → resolve navigation. A validation
failure stops the sequence before the repository is touched.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from app.core.validation import (
    OwnerCriteriaValidator,
    ValidationError,
    VetCriteriaValidator,
    coerce_page_number,
)
from app.domain.criteria import VetCriteria
from app.domain.interfaces import IOwnerReader, IVetReader
from app.domain.paging import NavigationDecision, PageRequest, Redirect, ShowListing
from app.services.navigation import resolve_navigation
from app.services.predicates import build_owner_predicate, build_vet_predicate
from app.services.query_executor import PaginatedQueryExecutor

logger = logging.getLogger(__name__)

OWNER_FORM_FIELDS = ("lastName", "telephone", "city")


@dataclass
class ListingOutcome:
    """Result of resolving one listing request.

    Exactly one of ``errors`` and ``decision`` is populated.
    """

    decision: Optional[NavigationDecision] = None
    criteria: Any = None
    errors: Dict[str, str] = field(default_factory=dict)
    form_values: Dict[str, str] = field(default_factory=dict)
    specialty_options: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_redirect(self) -> bool:
        return isinstance(self.decision, Redirect)

    @property
    def listing(self) -> Optional[ShowListing]:
        return self.decision if isinstance(self.decision, ShowListing) else None


def _raw_form_values(args: Mapping[str, Any], names) -> Dict[str, str]:
    values = {}
    for name in names:
        value = args.get(name)
        if value is not None and str(value).strip():
            values[name] = str(value).strip()
    return values


class OwnerListingService:
    """Resolves ``GET /owners`` requests."""

    def __init__(
        self,
        owner_reader: IOwnerReader,
        validator: Optional[OwnerCriteriaValidator] = None,
        case_sensitive: Optional[bool] = None,
    ):
        self.owner_reader = owner_reader
        self.validator = validator or OwnerCriteriaValidator()
        self.case_sensitive = case_sensitive
        self.executor = PaginatedQueryExecutor(owner_reader)

    def resolve(self, args: Mapping[str, Any]) -> ListingOutcome:
        page_number = coerce_page_number(args.get("page"))

        try:
            criteria = self.validator.validate(args)
        except ValidationError as e:
            return ListingOutcome(
                errors={e.field: e.message},
                form_values=_raw_form_values(args, OWNER_FORM_FIELDS),
            )

        predicate = build_owner_predicate(criteria, self.case_sensitive)
        page_result = self.executor.execute(predicate, PageRequest(page_number))
        decision = resolve_navigation(
            page_result,
            criteria.to_query_params(),
            fetch_first=lambda: self.executor.execute(predicate, PageRequest(1)),
        )
        return ListingOutcome(
            decision=decision,
            criteria=criteria,
            form_values=criteria.to_query_params(),
        )


class VetListingService:
    """Resolves ``GET /vets.html`` requests.

    The specialty dropdown offers the names held by the vets matching the
    last-name filter alone, so picking any of them narrows the same listing.
    """

    def __init__(
        self,
        vet_reader: IVetReader,
        validator: Optional[VetCriteriaValidator] = None,
        case_sensitive: Optional[bool] = None,
    ):
        self.vet_reader = vet_reader
        self.validator = validator or VetCriteriaValidator()
        self.case_sensitive = case_sensitive
        self.executor = PaginatedQueryExecutor(vet_reader)

    def resolve(self, args: Mapping[str, Any]) -> ListingOutcome:
        page_number = coerce_page_number(args.get("page"))
        criteria = self.validator.validate(args)

        known_names = self.vet_reader.list_specialty_names()
        predicate = build_vet_predicate(criteria, known_names, self.case_sensitive)
        page_result = self.executor.execute(predicate, PageRequest(page_number))
        decision = resolve_navigation(
            page_result,
            criteria.to_query_params(),
            fetch_first=lambda: self.executor.execute(predicate, PageRequest(1)),
        )

        return ListingOutcome(
            decision=decision,
            criteria=criteria,
            form_values=criteria.to_query_params(),
            specialty_options=self.specialty_options(criteria, known_names),
        )

    def specialty_options(self, criteria: VetCriteria, known_names) -> List[str]:
        if criteria.last_name is None:
            return sorted(known_names, key=str.lower)
        name_only = build_vet_predicate(
            VetCriteria(last_name=criteria.last_name), known_names, self.case_sensitive
        )
        return self.vet_reader.list_specialty_names(name_only)
