import logging
import os

from dotenv import load_dotenv
from flask import Flask, render_template

# Get logger for this module
logger = logging.getLogger(__name__)

# Load environment variables conditionally
# Only load from .env when DATABASE_URL is not already defined by the environment
if not os.getenv("DATABASE_URL"):
    load_dotenv()


def _frontend_folders():
    """Resolve frontend/templates and frontend/assets for local and Docker layouts."""
    script_dir = os.path.dirname(os.path.abspath(__file__))  # backend/app or /app/app

    if script_dir.startswith("/app/"):
        # In Docker: script is at /app/app/main.py, frontend is at /app/frontend
        return "/app/frontend/templates", "/app/frontend/assets"

    # Local: backend/app -> backend -> project-root -> frontend
    backend_dir = os.path.dirname(script_dir)
    project_root = os.path.dirname(backend_dir)
    return (
        os.path.join(project_root, "frontend", "templates"),
        os.path.join(project_root, "frontend", "assets"),
    )


def _init_sentry(env: str) -> None:
    sentry_dsn = os.getenv("SENTRY_DSN")
    if not sentry_dsn:
        logger.info(
            "Sentry not initialized (SENTRY_DSN not set)",
            extra={"context": {"environment": env}},
        )
        return

    import sentry_sdk
    from sentry_sdk.integrations.flask import FlaskIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=sentry_dsn,
        environment=env,
        release=os.getenv("GIT_SHA", "unknown"),
        integrations=[
            FlaskIntegration(),
            SqlalchemyIntegration(),
        ],
        traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        send_default_pii=False,  # Don't send PII by default
    )
    logger.info(
        "Sentry initialized",
        extra={
            "context": {
                "environment": env,
                "release": os.getenv("GIT_SHA", "unknown"),
                "traces_sample_rate": 0.1,
            }
        },
    )


def _init_metrics(app: Flask, env: str) -> None:
    from prometheus_client import CollectorRegistry
    from prometheus_flask_exporter import PrometheusMetrics

    # One registry per app so repeated create_app() calls do not collide
    metrics = PrometheusMetrics(app, registry=CollectorRegistry())
    metrics.info(
        "app_info",
        "Application information",
        version=os.getenv("GIT_SHA", "unknown"),
        environment=env,
    )
    app.extensions["prometheus_metrics"] = metrics
    logger.info(
        "Prometheus metrics initialized",
        extra={"context": {"metrics_endpoint": "/metrics"}},
    )


def create_app(config_overrides=None):
    """Build the Flask application.

    Args:
        config_overrides: Optional mapping applied to ``app.config`` before
            blueprints are registered (used by the test suite).
    """
    from app.core import config
    from app.core.exceptions import EntityNotFoundError
    from app.core.logging_config import setup_logging

    template_folder, static_folder = _frontend_folders()

    env = os.getenv("FLASK_ENV", "development")
    is_production = env == "production"

    app = Flask(
        __name__,
        template_folder=template_folder,
        static_folder=static_folder,
        static_url_path="/assets",
    )
    app.config["SECRET_KEY"] = os.getenv("FLASK_SECRET_KEY", "dev-secret-change-me")
    app.config["SEED_ON_STARTUP"] = config.get_seed_on_startup()
    app.config["METRICS_ENABLED"] = config.get_metrics_enabled()
    if config_overrides:
        app.config.update(config_overrides)

    # Configure structured logging (after app creation so we can register hooks)
    setup_logging(
        app=app,  # Pass app to register request/response hooks
        log_level=logging.INFO if is_production else logging.DEBUG,
        enable_sql_echo=not is_production and not app.config.get("TESTING"),
        log_to_file=config.get_log_to_file(),
        use_json_format=is_production,  # JSON logs in production, colored in dev
    )

    logger.info(
        "Application starting",
        extra={
            "context": {
                "environment": env,
                "template_folder": template_folder,
                "template_exists": os.path.exists(template_folder),
            }
        },
    )

    config.log_timezone_config()
    config.log_search_config()

    _init_sentry(env)

    if app.config["METRICS_ENABLED"]:
        _init_metrics(app, env)

    # Database tables and reference data
    from app.db.session import create_tables

    create_tables()
    logger.info("Database tables ensured")

    if app.config["SEED_ON_STARTUP"]:
        from app.db.seed import ensure_clinic_data

        ensure_clinic_data()

    # Register blueprints
    from app.controllers.health_controller import health_bp
    from app.controllers.owner_controller import owner_bp
    from app.controllers.vet_controller import vet_bp
    from app.controllers.visit_controller import visit_bp

    app.register_blueprint(owner_bp)
    app.register_blueprint(vet_bp)
    app.register_blueprint(visit_bp)
    app.register_blueprint(health_bp)

    @app.route("/")
    def index():
        return render_template("welcome.html")

    @app.errorhandler(404)
    def not_found(error):
        return render_template("errors/404.html", message=None), 404

    @app.errorhandler(EntityNotFoundError)
    def entity_not_found(error):
        logger.info(
            "Detail lookup missed",
            extra={"context": {"entity": error.entity, "entity_id": error.entity_id}},
        )
        return render_template("errors/404.html", message=str(error)), 404

    # Register template helper functions
    from app.utils.template_helpers import format_date, page_url, specialty_label

    app.jinja_env.globals.update(
        {
            "format_date": format_date,
            "page_url": page_url,
            "specialty_label": specialty_label,
        }
    )
    logger.info("Template helper functions registered")

    # Add CLI commands
    @app.cli.command("seed-data")
    def seed_data_command():
        """Load the clinic reference data into an empty database."""
        import click

        from app.db.seed import seed_clinic_data
        from app.db.session import SessionLocal

        with SessionLocal() as db:
            inserted = seed_clinic_data(db)
        click.echo("Clinic data seeded." if inserted else "Database already has data, nothing to do.")

    return app
