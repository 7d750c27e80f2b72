"""Unit tests for the persistent settings store."""

import json

import pytest

from clipboard_masker_lib.data_models.settings import Configuration, CustomPattern
from clipboard_masker_lib.exceptions import SettingsValidationError
from clipboard_masker_lib.settings_store import SettingsStore


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestLoad:
    def test_defaults_without_file(self, store, settings_path):
        config = store.snapshot()
        assert config == Configuration()
        assert config.mask_emails and config.clean_copied_links and config.start_on_launch
        assert not config.mask_urls
        assert config.custom_names == () and config.custom_patterns == ()
        assert not settings_path.exists()

    def test_corrupt_file_gives_defaults(self, settings_path):
        settings_path.write_text("{not json", encoding="utf-8")
        assert SettingsStore(settings_path).snapshot() == Configuration()

    def test_non_object_gives_defaults(self, settings_path):
        settings_path.write_text("[1, 2]", encoding="utf-8")
        assert SettingsStore(settings_path).snapshot() == Configuration()

    def test_invalid_key_falls_back_alone(self, settings_path):
        settings_path.write_text(
            json.dumps(
                {
                    "maskEmails": [1, 2],
                    "maskURLs": True,
                    "customPatterns": [{"name": "broken"}],
                    "customNames": ["Zed"],
                    "somethingElse": 1,
                }
            ),
            encoding="utf-8",
        )
        config = SettingsStore(settings_path).snapshot()
        assert config.mask_emails is True
        assert config.mask_urls is True
        assert config.custom_patterns == ()
        assert config.custom_names == ("zed",)


class TestMutations:
    def test_update_toggles_persists(self, store, settings_path):
        config = store.update(mask_urls=True, mask_ssn=False)
        assert config.mask_urls and not config.mask_ssn
        data = _read(settings_path)
        assert data["maskURLs"] is True
        assert data["maskSSN"] is False

    @pytest.mark.parametrize("changes", [{"unknown": True}, {"mask_urls": "yes"}])
    def test_update_rejects_bad_input(self, store, changes):
        with pytest.raises(SettingsValidationError):
            store.update(**changes)

    def test_custom_names(self, store, settings_path):
        assert store.add_custom_name("Zed ")
        assert not store.add_custom_name("ZED")
        assert not store.add_custom_name("   ")
        assert store.add_custom_name("amy")
        assert _read(settings_path)["customNames"] == ["zed", "amy"]

        assert store.remove_custom_name("Zed")
        assert not store.remove_custom_name("zed")
        assert store.snapshot().custom_names == ("amy",)

    def test_custom_pattern_lifecycle(self, store, settings_path):
        created = store.add_custom_pattern(
            CustomPattern(name="Key", pattern=r"sk-\w+", replacement="[API_KEY]")
        )
        stored = _read(settings_path)["customPatterns"]
        assert stored == [
            {
                "id": created.id,
                "name": "Key",
                "pattern": r"sk-\w+",
                "replacement": "[API_KEY]",
                "isEnabled": True,
            }
        ]

        disabled = created.model_copy(update={"is_enabled": False})
        assert store.update_custom_pattern(disabled)
        reloaded = SettingsStore(settings_path).snapshot()
        assert reloaded.custom_patterns[0].id == created.id
        assert reloaded.custom_patterns[0].is_enabled is False

        assert store.remove_custom_pattern(created.id)
        assert not store.remove_custom_pattern(created.id)
        assert store.snapshot().custom_patterns == ()

    def test_update_unknown_pattern_is_noop(self, store):
        ghost = CustomPattern(name="g", pattern="g", replacement="G")
        assert not store.update_custom_pattern(ghost)
        assert store.snapshot().custom_patterns == ()

    @pytest.mark.parametrize("field", ["name", "pattern", "replacement"])
    def test_empty_pattern_fields_rejected(self, store, field):
        values = {"name": "n", "pattern": "p", "replacement": "r", field: ""}
        with pytest.raises(SettingsValidationError):
            store.add_custom_pattern(CustomPattern(**values))

    def test_duplicate_id_rejected(self, store):
        pattern = CustomPattern(name="n", pattern="p", replacement="r")
        store.add_custom_pattern(pattern)
        with pytest.raises(SettingsValidationError):
            store.add_custom_pattern(pattern)

    def test_snapshot_is_immutable(self, store):
        snapshot = store.snapshot()
        store.add_custom_name("zed")
        assert snapshot.custom_names == ()
        assert store.snapshot().custom_names == ("zed",)

    def test_reload(self, store, settings_path):
        other = SettingsStore(settings_path)
        other.update(mask_names=False)
        assert store.snapshot().mask_names
        assert store.reload().mask_names is False
