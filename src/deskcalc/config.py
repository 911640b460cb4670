"""
Runtime settings for hosts embedding the calculator.

Values come from environment variables, optionally seeded from a .env file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DESKCALC_"


def _get_bool(key: str, default: bool) -> bool:
    value = os.getenv(key, str(default)).strip().lower()
    return value in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Calculator host settings."""

    log_level: str = "WARNING"
    log_json: bool = False
    log_file: str | None = None

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> Settings:
        """
        Load settings from the environment.

        Args:
            env_file: Optional .env file; variables already set in the
                environment take precedence over it

        Returns:
            Settings with environment overrides applied
        """
        if env_file is not None:
            load_dotenv(dotenv_path=env_file)

        return cls(
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", cls.log_level).upper(),
            log_json=_get_bool(f"{ENV_PREFIX}LOG_JSON", cls.log_json),
            log_file=os.getenv(f"{ENV_PREFIX}LOG_FILE") or None,
        )
