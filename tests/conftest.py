from datetime import date

import pytest

from plantkeeper.modules.plant_management import Plant, PlantType
from plantkeeper.shared.config.settings import get_settings

SETTINGS_ENV_VARS = [
    "APP_NAME",
    "APP_VERSION",
    "ENVIRONMENT",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FILE",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Every test starts from default settings and an empty settings cache."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def plant_data():
    return {
        "name": "Oak",
        "type": PlantType.TREE,
        "age": 3,
        "height": 20.5,
        "planting_date": date(2020, 5, 1),
    }


@pytest.fixture
def make_plant(plant_data):
    """Factory building a valid plant, with any attribute overridden."""
    def _make(**overrides):
        return Plant(**{**plant_data, **overrides})
    return _make


@pytest.fixture
def oak(make_plant):
    return make_plant()
