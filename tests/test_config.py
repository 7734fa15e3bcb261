"""
Tests for environment-driven configuration.
"""

import os
from unittest.mock import patch

import pytest

from docfill.config import http_port, load_smtp_settings
from docfill.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def no_dotenv():
    with patch("docfill.config.load_dotenv"):
        yield


class TestSmtpSettings:

    def test_defaults(self):
        with patch.dict(os.environ, {"SMTP_HOST": "smtp.example.test", "SMTP_USER": "me@example.test"}, clear=True):
            settings = load_smtp_settings()
        assert settings.host == "smtp.example.test"
        assert settings.port == 465
        assert settings.secure is True
        assert settings.sender == "me@example.test"

    def test_explicit_values(self):
        env = {
            "SMTP_HOST": "relay.test",
            "SMTP_PORT": "587",
            "SMTP_SECURE": "false",
            "SMTP_USER": "user",
            "SMTP_PASS": "secret",
            "FROM_EMAIL": "noreply@relay.test",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = load_smtp_settings()
        assert settings.port == 587
        assert settings.secure is False
        assert settings.password == "secret"
        assert settings.sender == "noreply@relay.test"

    def test_only_exact_false_disables_tls(self):
        for raw, expected in [("false", False), ("False", True), ("0", True), ("", True)]:
            with patch.dict(os.environ, {"SMTP_HOST": "h", "SMTP_SECURE": raw}, clear=True):
                assert load_smtp_settings().secure is expected, raw

    def test_missing_host(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ConfigurationError, match="SMTP_HOST"):
                load_smtp_settings()

    def test_bad_port(self):
        with patch.dict(os.environ, {"SMTP_HOST": "h", "SMTP_PORT": "abc"}, clear=True):
            with pytest.raises(ConfigurationError):
                load_smtp_settings()


class TestHttpPort:

    def test_default_port(self):
        with patch.dict(os.environ, {}, clear=True):
            assert http_port() == 3000

    def test_port_from_env(self):
        with patch.dict(os.environ, {"PORT": "8080"}, clear=True):
            assert http_port() == 8080

    def test_invalid_port(self):
        with patch.dict(os.environ, {"PORT": "eighty"}, clear=True):
            with pytest.raises(ConfigurationError):
                http_port()
