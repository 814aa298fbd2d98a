import logging
import os

from .main import create_app

logger = logging.getLogger(__name__)

# Create Flask app
app = create_app()

if __name__ == "__main__":
    # Use PORT from environment (for Render/production) or default to 5000 (for local dev)
    port = int(os.getenv("PORT", 5000))
    logger.info("Starting development server", extra={"context": {"port": port}})
    app.run(host="0.0.0.0", port=port, debug=os.getenv("FLASK_ENV", "development") != "production")
