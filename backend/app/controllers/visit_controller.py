import logging

from flask import Blueprint, render_template, request

from app.db.session import SessionLocal
from app.repositories.visit_repo import VisitRepository
from app.services.visit_service import UpcomingVisitService

logger = logging.getLogger(__name__)

visit_bp = Blueprint("visits", __name__, url_prefix="/visits")


@visit_bp.route("/upcoming")
def upcoming_visits():
    """Visits scheduled from today through today + ``days``."""
    db = SessionLocal()
    try:
        service = UpcomingVisitService(VisitRepository(db))
        days, visits = service.upcoming(request.args.get("days"))
        return render_template("visits/upcomingVisits.html", visits=visits, days=days)
    finally:
        db.close()
