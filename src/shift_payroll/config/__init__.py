import importlib
import os
from types import ModuleType

from dotenv import load_dotenv


def get_settings_module() -> str:
    # APP_ENV chọn module cấu hình, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "shift_payroll.config.production"

    if env in {"test", "testing"}:
        return "shift_payroll.config.testing"

    return "shift_payroll.config.development"


def load_settings() -> ModuleType:
    """Load .env (without overriding real env vars) then import the settings module."""
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())
