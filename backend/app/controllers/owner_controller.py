"""
Owner controller for the owner directory.

This controller:
- Handles HTTP concerns only; the listing service does the resolving
- Renders the search form on validation errors and on zero matches
- Redirects to the detail page when exactly one owner matches
"""

import logging
import time

from flask import Blueprint, redirect, render_template, request, url_for

from app.core.exceptions import EntityNotFoundError
from app.core.logging_config import log_performance
from app.db.session import SessionLocal
from app.repositories.owner_repo import OwnerRepository
from app.services.listing_service import OwnerListingService

logger = logging.getLogger(__name__)

owner_bp = Blueprint("owners", __name__, url_prefix="/owners")

NOT_FOUND_MESSAGE = "has not been found"


@owner_bp.route("/find")
def find_owners():
    """Display the empty owner search form."""
    return render_template("owners/findOwners.html", form={}, errors={}, not_found=False)


@owner_bp.route("", methods=["GET"])
def owner_list():
    """Resolve an owner search: form with errors, redirect, or paginated list."""
    db = SessionLocal()
    try:
        start = time.perf_counter()
        service = OwnerListingService(OwnerRepository(db))
        outcome = service.resolve(request.args)

        if not outcome.is_valid:
            return render_template(
                "owners/findOwners.html",
                form=outcome.form_values,
                errors=outcome.errors,
                not_found=False,
            )

        if outcome.is_redirect:
            return redirect(url_for("owners.owner_detail", owner_id=outcome.decision.entity_id))

        listing = outcome.listing
        log_performance(
            "owner_list",
            (time.perf_counter() - start) * 1000,
            total=listing.page_result.total_matching,
            page=listing.page_result.page_number,
        )

        if listing.not_found:
            return render_template(
                "owners/findOwners.html",
                form=outcome.form_values,
                errors={"lastName": NOT_FOUND_MESSAGE},
                not_found=True,
            )

        page_result = listing.page_result
        return render_template(
            "owners/ownersList.html",
            listing=listing,
            owners=page_result.items,
            form=outcome.form_values,
            page_result=page_result,
            current_page=page_result.page_number,
            total_pages=page_result.total_pages,
            total_items=page_result.total_matching,
        )
    except Exception:
        logger.exception(
            "Owner search failed",
            extra={"context": {"query": request.args.to_dict()}},
        )
        raise
    finally:
        db.close()


@owner_bp.route("/<int:owner_id>")
def owner_detail(owner_id: int):
    """Display one owner with pets and visits."""
    db = SessionLocal()
    try:
        owner = OwnerRepository(db).get_by_id(owner_id)
        if owner is None:
            raise EntityNotFoundError("Owner", owner_id)
        return render_template("owners/ownerDetails.html", owner=owner)
    finally:
        db.close()
