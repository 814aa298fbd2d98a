"""
Vet controller for the veterinarian directory and the vet JSON resource.
"""

import logging
import time

from flask import Blueprint, jsonify, redirect, render_template, request, url_for

from app.core.exceptions import EntityNotFoundError
from app.core.logging_config import log_performance
from app.db.session import SessionLocal
from app.repositories.vet_repo import VetRepository
from app.schemas.dtos import VetListResponse
from app.services.listing_service import VetListingService

logger = logging.getLogger(__name__)

vet_bp = Blueprint("vets", __name__)


@vet_bp.route("/vets.html")
def vet_list():
    """Resolve the vet directory: redirect on a single match, otherwise the list page."""
    db = SessionLocal()
    try:
        start = time.perf_counter()
        service = VetListingService(VetRepository(db))
        outcome = service.resolve(request.args)

        if outcome.is_redirect:
            return redirect(url_for("vets.vet_detail", vet_id=outcome.decision.entity_id))

        listing = outcome.listing
        page_result = listing.page_result
        log_performance(
            "vet_list",
            (time.perf_counter() - start) * 1000,
            total=page_result.total_matching,
            page=page_result.page_number,
        )
        return render_template(
            "vets/vetList.html",
            listing=listing,
            vets=page_result.items,
            not_found=listing.not_found,
            form=outcome.form_values,
            specialties=outcome.specialty_options,
            selected_specialty=outcome.form_values.get("specialty", ""),
            page_result=page_result,
            current_page=page_result.page_number,
            total_pages=page_result.total_pages,
            total_items=page_result.total_matching,
        )
    except Exception:
        logger.exception(
            "Vet listing failed",
            extra={"context": {"query": request.args.to_dict()}},
        )
        raise
    finally:
        db.close()


@vet_bp.route("/vets")
def vet_resource_list():
    """All vets with their specialties as JSON."""
    db = SessionLocal()
    try:
        vets = VetRepository(db).get_all()
        return jsonify(VetListResponse.from_domain(vets).to_dict())
    finally:
        db.close()


@vet_bp.route("/vets/<int:vet_id>")
def vet_detail(vet_id: int):
    db = SessionLocal()
    try:
        vet = VetRepository(db).get_by_id(vet_id)
        if vet is None:
            raise EntityNotFoundError("Vet", vet_id)
        return render_template("vets/vetDetails.html", vet=vet)
    finally:
        db.close()
