from datetime import date, datetime, timedelta, timezone

import pytest

from plantkeeper.shared.config.settings import get_settings
from plantkeeper.shared.utils.formatters import (
    format_plant_number,
    format_planting_date,
    format_watering_time,
)
from plantkeeper.shared.utils.localization import (
    TRANSLATIONS,
    get_current_locale,
    get_supported_locales,
    resolve_locale,
    translate,
)


class TestTranslate:

    def test_english_template(self):
        assert translate("plants.planting_info", "en", name="Oak", date="01.05.2020") == (
            "Oak was planted on 01.05.2020."
        )

    def test_ukrainian_template(self):
        assert translate("plants.planting_info", "uk", name="Дуб", date="01.05.2020") == (
            "Дуб було висаджено 01.05.2020."
        )

    def test_default_locale_comes_from_settings(self, monkeypatch):
        assert get_current_locale() == "en"
        assert translate("plants.never_watered") == "Never"

        monkeypatch.setenv("DEFAULT_LOCALE", "uk")
        get_settings.cache_clear()

        assert get_current_locale() == "uk"
        assert translate("plants.never_watered") == "Ніколи"

    def test_unknown_locale_falls_back_to_english(self):
        assert translate("plants.age_category.old", "fr") == "Old"

    def test_unknown_key_returns_key(self, caplog):
        assert translate("plants.unknown", "uk") == "plants.unknown"
        assert "Unknown translation key: plants.unknown" in caplog.text

    def test_without_arguments_template_is_untouched(self):
        assert translate("plants.description", "en") == TRANSLATIONS["en"]["plants.description"]

    def test_resolve_locale(self, monkeypatch):
        assert resolve_locale("uk") == "uk"
        assert resolve_locale("xx") == "en"
        assert resolve_locale() == "en"

        monkeypatch.setenv("DEFAULT_LOCALE", "uk")
        get_settings.cache_clear()
        assert resolve_locale() == "uk"

    def test_catalogues_have_the_same_keys(self):
        assert set(TRANSLATIONS["uk"]) == set(TRANSLATIONS["en"])
        assert get_supported_locales() == ["en", "uk"]


class TestFormatters:

    def test_naive_watering_time(self):
        assert format_watering_time(datetime(2024, 3, 5, 7, 9), "en") == "05.03.2024 07:09"

    def test_aware_watering_time_keeps_its_zone(self):
        kyiv_summer = timezone(timedelta(hours=3))
        watered_at = datetime(2024, 7, 1, 23, 30, tzinfo=kyiv_summer)
        assert format_watering_time(watered_at, "uk") == "01.07.2024 23:30"

    def test_unsupported_locale_renders_in_english(self):
        assert format_watering_time(datetime(2024, 3, 5, 7, 9), "xx") == "05.03.2024 07:09"
        assert format_planting_date(date(2020, 5, 1), "xx") == "01.05.2020"

    def test_planting_date(self):
        assert format_planting_date(date(2020, 5, 1), "en") == "01.05.2020"
        assert format_planting_date(datetime(1999, 12, 31, 18, 0), "uk") == "31.12.1999"

    @pytest.mark.parametrize(
        "value, text",
        [
            (20.0, "20"),
            (20.5, "20.5"),
            (0.1, "0.1"),
            (3, "3"),
            (115.7, "115.7"),
        ],
    )
    def test_plant_number(self, value, text):
        assert format_plant_number(value) == text
