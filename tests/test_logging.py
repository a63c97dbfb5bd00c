import json
import logging

import pytest

from plantkeeper.shared.utils import logging as plant_logging
from plantkeeper.shared.utils.logging import (
    ContextualFormatter,
    JSONFormatter,
    StructuredLogger,
    correlation_id_var,
    get_logger,
    log_context,
    setup_logging,
)


@pytest.fixture
def isolated_logging(monkeypatch):
    """Let setup_logging run and undo everything it installed afterwards."""
    root = logging.getLogger()
    previous_level = root.level
    monkeypatch.setattr(plant_logging, "_logging_configured", False)
    yield
    for handler in list(plant_logging._installed_handlers):
        root.removeHandler(handler)
        handler.close()
    plant_logging._installed_handlers.clear()
    root.setLevel(previous_level)


class TestGetLogger:

    def test_returns_cached_structured_logger(self):
        logger = get_logger("tests.cached")
        assert isinstance(logger, StructuredLogger)
        assert get_logger("tests.cached") is logger
        assert logger.name == "tests.cached"

    def test_kwargs_become_extra_fields(self, caplog):
        caplog.set_level(logging.INFO)
        get_logger("tests.extra").info("hello", extra={"plant_name": "Oak"}, amount=2)

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.extra_fields == {"plant_name": "Oak", "amount": 2}

    def test_business_event(self, caplog):
        caplog.set_level(logging.INFO)
        get_logger("tests.business").log_business_event(
            "plant.watered", "Oak was watered", entity_type="plant", extra={"plant_name": "Oak"}
        )

        fields = caplog.records[-1].extra_fields
        assert fields["event_type"] == "business_event"
        assert fields["business_event_type"] == "plant.watered"
        assert fields["entity_type"] == "plant"
        assert fields["plant_name"] == "Oak"

    def test_caller_is_reported(self, caplog):
        caplog.set_level(logging.INFO)
        get_logger("tests.caller").info("where")
        assert caplog.records[-1].funcName == "test_caller_is_reported"

    def test_business_event_caller_is_reported(self, caplog):
        caplog.set_level(logging.INFO)
        get_logger("tests.caller").log_business_event("plant.grew", "Oak grew")
        assert caplog.records[-1].funcName == "test_business_event_caller_is_reported"

    def test_critical(self, caplog):
        get_logger("tests.critical").critical("Greenhouse on fire", extra={"plant_name": "Oak"})

        record = caplog.records[-1]
        assert record.levelno == logging.CRITICAL
        assert record.extra_fields == {"plant_name": "Oak"}


class TestLogContext:

    def test_sets_and_resets_correlation_id(self):
        assert correlation_id_var.get() == ""
        with log_context("abc-123") as context:
            assert context == {"correlation_id": "abc-123"}
            assert correlation_id_var.get() == "abc-123"
        assert correlation_id_var.get() == ""

    def test_generates_correlation_id(self):
        with log_context() as context:
            assert context["correlation_id"]


class TestSetupLogging:

    def test_json_file_logging(self, isolated_logging, tmp_path):
        log_file = tmp_path / "logs" / "plants.log"
        setup_logging(log_level="DEBUG", log_format="json", log_file=str(log_file), enable_console=False)

        with log_context("corr-1"):
            get_logger("tests.json").info("Oak was watered", extra={"plant_name": "Oak"})
        for handler in plant_logging._installed_handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert entry["message"] == "Oak was watered"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "tests.json"
        assert entry["service"] == "plantkeeper"
        assert entry["correlation_id"] == "corr-1"
        assert entry["extra"] == {"plant_name": "Oak"}
        assert "timestamp" in entry

    def test_text_console_logging(self, isolated_logging, capsys):
        setup_logging(log_level="INFO", log_format="text")

        get_logger("tests.text").info("Rose grew")
        get_logger("tests.text").debug("hidden")

        out = capsys.readouterr().out
        assert "tests.text - INFO - Rose grew" in out
        assert "hidden" not in out

    def test_startup_event_names_the_version(self, isolated_logging, monkeypatch, caplog):
        monkeypatch.setenv("APP_VERSION", "2.3.4")
        caplog.set_level(logging.INFO)
        setup_logging(enable_console=False)

        record = [r for r in caplog.records if r.name == "startup"][-1]
        assert record.getMessage() == "Service Plant Keeper 2.3.4 starting up"
        assert record.extra_fields["version"] == "2.3.4"
        assert record.extra_fields["event_type"] == "service_startup"

    def test_settings_supply_defaults(self, isolated_logging, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        setup_logging(enable_console=False)
        assert logging.getLogger().level == logging.WARNING

    def test_runs_once_unless_forced(self, isolated_logging):
        setup_logging(log_level="INFO", enable_console=True)
        installed = list(plant_logging._installed_handlers)

        setup_logging(log_level="DEBUG", enable_console=True)
        assert plant_logging._installed_handlers == installed

        setup_logging(log_level="DEBUG", enable_console=True, force=True)
        assert len(plant_logging._installed_handlers) == 1
        assert plant_logging._installed_handlers != installed
        assert logging.getLogger().level == logging.DEBUG


class TestFormatters:

    def _record(self, **extra_fields):
        record = logging.LogRecord("tests.fmt", logging.INFO, __file__, 1, "message", None, None)
        if extra_fields:
            record.extra_fields = extra_fields
        return record

    def test_contextual_formatter_adds_context(self):
        formatter = ContextualFormatter("%(service)s %(correlation_id)s %(plant_name)s %(message)s")
        with log_context("ctx-9"):
            line = formatter.format(self._record(plant_name="Fern"))
        assert line == "plantkeeper ctx-9 Fern message"

    def test_json_formatter_without_context(self):
        entry = json.loads(JSONFormatter().format(self._record()))
        assert entry["message"] == "message"
        assert "correlation_id" not in entry
        assert "extra" not in entry
