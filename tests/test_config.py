"""Tests for settings and logging setup."""

import logging

from customer_api.app.core.config import Settings
from customer_api.app.core.logging_config import setup_logging


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.project_name
        assert isinstance(settings.seed_customers, bool)
        assert isinstance(settings.port, int)

    def test_override(self):
        settings = Settings(api_username="admin", api_password="secret", seed_customers=False)

        assert settings.api_username == "admin"
        assert settings.api_password == "secret"
        assert settings.seed_customers is False


class TestLogging:
    def test_setup_logging_is_idempotent(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)

        setup_logging("debug")
        setup_logging("debug")

        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert logging.getLogger("uvicorn.access").level == logging.DEBUG
