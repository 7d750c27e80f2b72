from typing import Optional

from flask import Flask

from clipboard_masker_lib.anonymizer import Anonymizer
from clipboard_masker_lib.constants import DEFAULT_API_PREFIX
from clipboard_masker_lib.settings_store import SettingsStore

from clipboard_masker_web.web.api import api_bp


def create_app(
    store: Optional[SettingsStore] = None,
    anonymizer: Optional[Anonymizer] = None,
    api_prefix: str = DEFAULT_API_PREFIX,
) -> Flask:
    """
    Lightweight Flask application exposing the masking engine and the
    settings store over JSON.
    """
    app = Flask(__name__)

    app.config["SETTINGS_STORE"] = store or SettingsStore()
    app.config["ANONYMIZER"] = anonymizer or Anonymizer()

    app.register_blueprint(api_bp, url_prefix=api_prefix or None)

    # ---- JSON error handlers ----
    @app.errorhandler(400)
    def handle_400(error):
        return {"error": error.description or "Bad request"}, 400

    @app.errorhandler(404)
    def handle_404(error):
        return {"error": error.description or "Resource not found"}, 404

    @app.errorhandler(405)
    def handle_405(error):
        return {"error": "Method not allowed"}, 405

    @app.errorhandler(500)
    def handle_500(error):
        return {"error": "Internal server error"}, 500

    return app
