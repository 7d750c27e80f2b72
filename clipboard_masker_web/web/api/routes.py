"""
REST endpoints of the clipboard‑masker service.

POST   /transform                         {"text"}            -> {"text", "changed"}
POST   /clean_link                        {"url", "hop_limit"} -> {"url", "changed"}
GET    /settings                                              -> configuration
PATCH  /settings                          {"maskURLs": true}  -> configuration
POST   /settings/custom_names             {"name"}            -> configuration
DELETE /settings/custom_names/<name>                          -> configuration
POST   /settings/custom_patterns          pattern fields      -> pattern (201)
PUT    /settings/custom_patterns/<id>     pattern fields      -> pattern
DELETE /settings/custom_patterns/<id>                         -> configuration
GET    /ping                                                  -> {"status": "ok"}
"""

from flask import Blueprint, abort, current_app, request
from pydantic import ValidationError

from clipboard_masker_lib.anonymizer import Anonymizer
from clipboard_masker_lib.data_models.masking import (
    CleanLinkModel,
    CustomNameModel,
    CustomPatternModel,
    TransformTextModel,
)
from clipboard_masker_lib.data_models.settings import (
    TOGGLE_FIELDS,
    Configuration,
    CustomPattern,
)
from clipboard_masker_lib.exceptions import SettingsValidationError
from clipboard_masker_lib.settings_store import SettingsStore

api_bp = Blueprint("masker_api", __name__)

_TOGGLE_ALIASES = {
    Configuration.model_fields[name].alias: name for name in TOGGLE_FIELDS
}


def _store() -> SettingsStore:
    return current_app.config["SETTINGS_STORE"]


def _anonymizer() -> Anonymizer:
    return current_app.config["ANONYMIZER"]


def _payload() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Expected a JSON object")
    return data


@api_bp.errorhandler(ValidationError)
def handle_validation_error(error: ValidationError):
    return {"error": error.errors(include_url=False, include_context=False)}, 400


@api_bp.errorhandler(SettingsValidationError)
def handle_settings_error(error: SettingsValidationError):
    return {"error": str(error)}, 400


@api_bp.route("/ping", methods=["GET"])
def ping():
    return {"status": "ok"}


@api_bp.route("/transform", methods=["POST"])
def transform_text():
    body = TransformTextModel.model_validate(_payload())
    result = _anonymizer().mask(body.text, _store().snapshot())
    return {"text": result.output, "changed": result.changed}


@api_bp.route("/clean_link", methods=["POST"])
def clean_link():
    body = CleanLinkModel.model_validate(_payload())
    cleaner = _anonymizer().link_cleaner
    cleaned = cleaner.clean(body.url, hop_limit=body.hop_limit)
    return {"url": cleaned, "changed": cleaned != body.url}


@api_bp.route("/settings", methods=["GET"])
def get_settings():
    return _store().snapshot().to_storage()


@api_bp.route("/settings", methods=["PATCH"])
def update_settings():
    toggles = {}
    for key, value in _payload().items():
        field = _TOGGLE_ALIASES.get(key, key)
        toggles[field] = value
    return _store().update(**toggles).to_storage()


@api_bp.route("/settings/custom_names", methods=["POST"])
def add_custom_name():
    body = CustomNameModel.model_validate(_payload())
    _store().add_custom_name(body.name)
    return _store().snapshot().to_storage()


@api_bp.route("/settings/custom_names/<name>", methods=["DELETE"])
def remove_custom_name(name: str):
    if not _store().remove_custom_name(name):
        abort(404, description=f"Custom name {name!r} not found")
    return _store().snapshot().to_storage()


@api_bp.route("/settings/custom_patterns", methods=["POST"])
def add_custom_pattern():
    body = CustomPatternModel.model_validate(_payload())
    created = _store().add_custom_pattern(CustomPattern(**body.model_dump()))
    return created.model_dump(by_alias=True), 201


@api_bp.route("/settings/custom_patterns/<pattern_id>", methods=["PUT"])
def update_custom_pattern(pattern_id: str):
    body = CustomPatternModel.model_validate(_payload())
    updated = CustomPattern(id=pattern_id, **body.model_dump())
    if not _store().update_custom_pattern(updated):
        abort(404, description=f"Custom pattern {pattern_id} not found")
    return updated.model_dump(by_alias=True)


@api_bp.route("/settings/custom_patterns/<pattern_id>", methods=["DELETE"])
def remove_custom_pattern(pattern_id: str):
    if not _store().remove_custom_pattern(pattern_id):
        abort(404, description=f"Custom pattern {pattern_id} not found")
    return _store().snapshot().to_storage()
