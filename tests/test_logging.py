"""Tests for coin.core.logging and coin.config."""

import io
import logging

import pytest

from coin import config, fault_injection
from coin.core import logging as coin_logging


@pytest.fixture
def package_logger(monkeypatch):
    """Let configure_logging() run again; restore the coin logger afterwards."""
    package = logging.getLogger("coin")
    saved_level = package.level
    saved_handlers = list(package.handlers)
    monkeypatch.setattr(coin_logging, "_CONFIGURED", False)
    yield package
    package.setLevel(saved_level)
    package.handlers[:] = saved_handlers


class TestConfigureLogging:
    def test_explicit_level(self, package_logger):
        assert coin_logging.configure_logging("debug") is package_logger
        assert package_logger.level == logging.DEBUG

    def test_falls_back_to_config(self, package_logger, monkeypatch):
        monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")
        coin_logging.configure_logging()
        assert package_logger.level == logging.WARNING

    def test_unknown_level_means_info(self, package_logger):
        coin_logging.configure_logging("chatty")
        assert package_logger.level == logging.INFO

    def test_only_configures_once(self, package_logger):
        coin_logging.configure_logging("ERROR")
        coin_logging.configure_logging("DEBUG")
        assert package_logger.level == logging.ERROR

    def test_root_logger_untouched(self, package_logger):
        root = logging.getLogger()
        before = root.level
        coin_logging.configure_logging("DEBUG")
        assert root.level == before

    def test_no_handler_when_root_already_has_one(self, package_logger):
        # pytest's capture handler sits on the root logger during tests.
        assert logging.getLogger().handlers
        coin_logging.configure_logging("DEBUG")
        assert package_logger.handlers == []

    def test_handler_attached_and_writes_package_records(
        self, package_logger, monkeypatch,
    ):
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        buf = io.StringIO()
        coin_logging.configure_logging("DEBUG", fmt="%(name)s|%(message)s", stream=buf)
        fault_injection.logger.debug("hello")
        assert len(package_logger.handlers) == 1
        assert "coin.fault_injection|hello" in buf.getvalue()


class TestGetLogger:
    def test_package_names_kept(self):
        assert coin_logging.get_logger("coin.x") is logging.getLogger("coin.x")
        assert coin_logging.get_logger("coin") is logging.getLogger("coin")

    def test_foreign_names_nested_under_package(self):
        assert coin_logging.get_logger("campaign").name == "coin.campaign"
        assert coin_logging.get_logger("coinage").name == "coin.coinage"

    def test_fault_injection_logs_under_package(self):
        assert fault_injection.logger.name == "coin.fault_injection"


class TestEnvInt:
    def test_unset(self, monkeypatch):
        monkeypatch.delenv("COIN_TEST_INT", raising=False)
        assert config._env_int("COIN_TEST_INT") is None
        assert config._env_int("COIN_TEST_INT", 5) == 5

    def test_parsed(self, monkeypatch):
        monkeypatch.setenv("COIN_TEST_INT", " 42 ")
        assert config._env_int("COIN_TEST_INT") == 42

    def test_malformed_falls_back(self, monkeypatch):
        monkeypatch.setenv("COIN_TEST_INT", "forty-two")
        assert config._env_int("COIN_TEST_INT") is None

    def test_blank_falls_back(self, monkeypatch):
        monkeypatch.setenv("COIN_TEST_INT", "  ")
        assert config._env_int("COIN_TEST_INT", 7) == 7
