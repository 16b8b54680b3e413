from flask import Flask

from hotelier.cleaning import CleaningService
from hotelier.config import config
from hotelier.logging_config import setup_logging


def create_app(cleaning_service: CleaningService = None) -> Flask:
    """Application factory."""
    setup_logging(config.log_level)

    app = Flask(__name__)

    app.cleaning_service = cleaning_service or CleaningService()

    # Register blueprints
    from hotelier.api.cleanings import bp as cleanings_bp

    app.register_blueprint(cleanings_bp, url_prefix="/api/cleanings")

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    return app
