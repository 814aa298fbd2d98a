"""
Health controller - health check endpoint for monitoring.
"""

import logging

from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.db.session import SessionLocal

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__, url_prefix="/health")


def database_connected() -> bool:
    """Run ``SELECT 1`` against the configured database."""
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(
            "Database connection failed",
            extra={"context": {"error": str(e)}},
            exc_info=True,
        )
        return False


@health_bp.route("", methods=["GET"])
def health_check():
    """
    Report service and database health.

    Status codes:
        200: database reachable
        503: database unreachable
    """
    db_status = database_connected()
    return jsonify(
        {
            "status": "healthy" if db_status else "unhealthy",
            "database": "connected" if db_status else "disconnected",
        }
    ), (200 if db_status else 503)
