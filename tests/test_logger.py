# tests/test_logger.py
"""Unit tests for log file resolution."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.config import settings
from app.utils import logger as app_logger


class TestLogPath:
    def test_relative_path_resolves_against_project_root(self, monkeypatch):
        monkeypatch.setattr(settings, "LOG_FILE", "logs/custom.log")

        assert app_logger._log_path() == os.path.join(app_logger.PROJECT_ROOT, "logs", "custom.log")

    def test_absolute_path_kept(self, monkeypatch, tmp_path):
        target = str(tmp_path / "api.log")
        monkeypatch.setattr(settings, "LOG_FILE", target)

        assert app_logger._log_path() == target

    def test_named_logger(self):
        assert app_logger.get_logger("app.services.movement_service").name == "app.services.movement_service"
