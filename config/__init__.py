import importlib
import os
from types import ModuleType
from typing import Optional

ENVIRONMENTS = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """APP_ENV -> settings module path; anything unknown means development."""
    env = os.getenv("APP_ENV", "development").strip().lower()
    return ENVIRONMENTS.get(env, "config.development")


def load_settings(module: Optional[str] = None) -> ModuleType:
    return importlib.import_module(module or get_settings_module())
