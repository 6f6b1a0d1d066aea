import json
import logging

import pytest

from shift_payroll.config import get_settings_module
from shift_payroll.logging_config import JSONFormatter


@pytest.mark.parametrize(
    "env,module",
    [
        ("production", "shift_payroll.config.production"),
        ("PROD", "shift_payroll.config.production"),
        ("testing", "shift_payroll.config.testing"),
        ("development", "shift_payroll.config.development"),
        ("anything-else", "shift_payroll.config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_default_settings_module(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "shift_payroll.config.development"


def test_json_formatter_keeps_context():
    record = logging.LogRecord("shift_payroll.shifts", logging.INFO, __file__, 10, "shift %s rejected", (7,), None)
    record.worker_id = 3
    record.violations = ["max_daily_duration_exceeded"]

    entry = json.loads(JSONFormatter().format(record))

    assert entry["message"] == "shift 7 rejected"
    assert entry["level"] == "INFO"
    assert entry["worker_id"] == 3
    assert entry["violations"] == ["max_daily_duration_exceeded"]
    assert "workplace_id" not in entry
