from clipboard_masker_web.web.api.routes import api_bp

__all__ = ["api_bp"]
