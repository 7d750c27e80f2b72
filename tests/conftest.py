import pytest

from clipboard_masker_lib.anonymizer import Anonymizer
from clipboard_masker_lib.data_models.settings import Configuration
from clipboard_masker_lib.settings_store import SettingsStore


@pytest.fixture
def anonymizer():
    return Anonymizer()


@pytest.fixture
def default_config():
    return Configuration()


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings.json"


@pytest.fixture
def store(settings_path):
    return SettingsStore(settings_path)
