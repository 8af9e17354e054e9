"""
Settings and logging tests

Tests environment-driven defaults and verbosity-gated logging.
"""

import importlib

import pytest
from loguru import logger

from chatmarkup import markify, scan
from chatmarkup.config import AppSettings, appsettings
from chatmarkup.models.tokens import DEFAULT_CLASSES, TokenKind


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test"""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


class TestAppSettings:
    """Test settings defaults and environment overrides"""

    def test_defaults_match_constants(self):
        """Default settings give the built-in class mapping"""
        assert AppSettings().classes_default() == DEFAULT_CLASSES

    def test_environment_override(self, monkeypatch):
        """CHATMARKUP_ variables override class names"""
        monkeypatch.setenv("CHATMARKUP_CLASS_BOLD", "fw-bold")
        monkeypatch.setenv("chatmarkup_verbosity", "2")
        settings = AppSettings()
        assert settings.class_bold == "fw-bold"
        assert settings.class_italic == "text-italic"
        assert settings.verbosity == 2

    def test_classes_default_is_fresh(self):
        """Mutating the returned dict does not affect later calls"""
        settings = AppSettings()
        classes = settings.classes_default()
        classes[TokenKind.ASTERISK] = "changed"
        assert settings.classes_default()[TokenKind.ASTERISK] == "text-bold"

    def test_renderer_reads_settings(self, monkeypatch):
        """Default mapping comes from the settings singleton"""
        monkeypatch.setattr(appsettings, "class_bold", "fw-bold")
        assert markify("*x*") == '<span class="fw-bold">x</span>'

    def test_explicit_mapping_wins(self, monkeypatch):
        monkeypatch.setattr(appsettings, "class_bold", "fw-bold")
        assert markify("*x*", {TokenKind.ASTERISK: "bbb"}) == '<span class="bbb">x</span>'


class TestLogging:
    """Test verbosity-gated logging"""

    def test_silent_by_default(self, log_messages):
        """No output at the default verbosity"""
        markify("*x*")
        scan("_y_")
        assert log_messages == []

    def test_per_call_verbosity(self, log_messages):
        """markify(verbosity=3) traces resolved spans"""
        markify("*x* **", verbosity=3)
        assert any("Resolved asterisk span" in m for m in log_messages)
        assert any("Empty asterisk pair" in m for m in log_messages)
        assert any("Scanned" in m for m in log_messages)

    def test_verbosity_does_not_leak(self, log_messages):
        """A verbose markify call leaves later calls silent"""
        markify("*x*", verbosity=3)
        log_messages.clear()
        scan("*x*")
        assert log_messages == []

    def test_settings_verbosity(self, log_messages, monkeypatch):
        """Bare scan() logs when CHATMARKUP_VERBOSITY allows"""
        monkeypatch.setattr(appsettings, "verbosity", 2)
        scan("*x*")
        assert any("Scanned" in m for m in log_messages)

    def test_import_keeps_application_handlers(self):
        """Loading the logging module leaves existing sinks in place"""
        import chatmarkup.lib.log as log_module

        received = []
        handler_id = logger.add(lambda message: received.append(message.record["message"]), level="DEBUG")
        try:
            importlib.reload(log_module)
            markify("*x*", verbosity=2)
        finally:
            logger.remove(handler_id)
        assert any("Rendered" in m for m in received)

    def test_records_name_the_calling_module(self):
        """Records are attributed to the scanner, not the logging helper"""
        names = []
        handler_id = logger.add(lambda message: names.append(message.record["name"]), level="DEBUG")
        try:
            markify("*x*", verbosity=2)
        finally:
            logger.remove(handler_id)
        assert "chatmarkup.lib.scanner" in names
        assert "chatmarkup.lib.log" not in names
