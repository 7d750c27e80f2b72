"""
Persistent settings store.

Keeps the current :class:`Configuration` snapshot and mirrors it to a JSON
file.  Every mutation replaces the snapshot (configurations are immutable)
and is followed by a save, so callers never hold a half updated object.

Loading is forgiving in the same way a key/value preference store is: a
missing file or key means "use the default", and a key holding a value of
the wrong shape falls back to its default without discarding the rest.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from clipboard_masker_lib.constants import SETTINGS_FILE
from clipboard_masker_lib.data_models.settings import (
    TOGGLE_FIELDS,
    Configuration,
    CustomPattern,
)
from clipboard_masker_lib.exceptions import SettingsValidationError

logger = logging.getLogger(__name__)

_STORAGE_KEYS = {
    field.alias or name for name, field in Configuration.model_fields.items()
}


class SettingsStore:
    """
    JSON file backed holder of the current configuration.

    Parameters
    ----------
    path : str | Path
        Location of the settings file; created on first save.
    """

    def __init__(self, path: Path | str = SETTINGS_FILE):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._config = self.load()

    # ------------------------------------------------------------------ #
    def snapshot(self) -> Configuration:
        """Return the current, immutable configuration."""
        return self._config

    def load(self) -> Configuration:
        """
        Read the settings file, applying defaults for anything missing or
        malformed.  Never raises.
        """
        data = {k: v for k, v in self._read_raw().items() if k in _STORAGE_KEYS}

        while True:
            try:
                return Configuration.model_validate(data)
            except ValidationError as exc:
                bad_keys = {err["loc"][0] for err in exc.errors() if err["loc"]}
                bad_keys &= set(data)
                if not bad_keys:
                    logger.warning("Unusable settings in %s, using defaults", self.path)
                    return Configuration()
                logger.warning(
                    "Ignoring invalid settings %s in %s", sorted(bad_keys), self.path
                )
                for key in bad_keys:
                    data.pop(key)

    def reload(self) -> Configuration:
        with self._lock:
            self._config = self.load()
            return self._config

    def save(self) -> None:
        """Write the current configuration to :attr:`path` atomically."""
        payload = json.dumps(self._config.to_storage(), indent=2, ensure_ascii=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Settings saved to %s", self.path)

    # ------------------------------------------------------------------ #
    def update(self, **toggles: bool) -> Configuration:
        """
        Set boolean rule toggles, e.g. ``update(mask_urls=True)``.

        Raises
        ------
        SettingsValidationError
            For an unknown toggle or a non boolean value.
        """
        for key, value in toggles.items():
            if key not in TOGGLE_FIELDS:
                raise SettingsValidationError(f"Unknown setting: {key}")
            if not isinstance(value, bool):
                raise SettingsValidationError(f"Setting {key} must be a boolean")
        return self._replace(**toggles)

    def add_custom_name(self, name: str) -> bool:
        """
        Append *name* (lower‑cased) unless blank or already present.

        Returns ``True`` when the list changed.
        """
        name = name.strip().lower()
        with self._lock:
            if not name or name in self._config.custom_names:
                return False
            self._set(custom_names=self._config.custom_names + (name,))
            return True

    def remove_custom_name(self, name: str) -> bool:
        name = name.strip().lower()
        with self._lock:
            if name not in self._config.custom_names:
                return False
            self._set(
                custom_names=tuple(n for n in self._config.custom_names if n != name)
            )
            return True

    def add_custom_pattern(self, custom_pattern: CustomPattern) -> CustomPattern:
        """
        Append *custom_pattern* to the list.

        Raises
        ------
        SettingsValidationError
            If name, pattern or replacement is empty, or the id is taken.
        """
        self._validate_pattern(custom_pattern)
        with self._lock:
            if any(p.id == custom_pattern.id for p in self._config.custom_patterns):
                raise SettingsValidationError(
                    f"Custom pattern {custom_pattern.id} already exists"
                )
            self._set(custom_patterns=self._config.custom_patterns + (custom_pattern,))
        return custom_pattern

    def remove_custom_pattern(self, pattern_id: str) -> bool:
        with self._lock:
            kept = tuple(p for p in self._config.custom_patterns if p.id != pattern_id)
            if len(kept) == len(self._config.custom_patterns):
                return False
            self._set(custom_patterns=kept)
            return True

    def update_custom_pattern(self, custom_pattern: CustomPattern) -> bool:
        """
        Replace the stored pattern with the same id; unknown ids are ignored.
        """
        self._validate_pattern(custom_pattern)
        with self._lock:
            patterns = list(self._config.custom_patterns)
            for index, existing in enumerate(patterns):
                if existing.id == custom_pattern.id:
                    patterns[index] = custom_pattern
                    self._set(custom_patterns=tuple(patterns))
                    return True
            return False

    def get_custom_pattern(self, pattern_id: str) -> Optional[CustomPattern]:
        return next(
            (p for p in self._config.custom_patterns if p.id == pattern_id), None
        )

    # ------------------------------------------------------------------ #
    def _replace(self, **changes: Any) -> Configuration:
        with self._lock:
            self._set(**changes)
            return self._config

    def _set(self, **changes: Any) -> None:
        # model_copy skips validation, validate the merged data instead
        data = self._config.model_dump()
        data.update(changes)
        self._config = Configuration.model_validate(data)
        self.save()

    @staticmethod
    def _validate_pattern(custom_pattern: CustomPattern) -> None:
        for field in ("name", "pattern", "replacement"):
            if not getattr(custom_pattern, field):
                raise SettingsValidationError(f"Custom pattern {field} is empty")

    def _read_raw(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Cannot read settings from %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Settings file %s does not hold an object", self.path)
            return {}
        return raw
