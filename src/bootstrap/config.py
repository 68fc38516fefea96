"""Bootstrap loading of configuration from the environment and .env files."""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

from src.config.guard_config import GuardConfig


def load_guard_config(dotenv_path: str | Path | None = None) -> GuardConfig:
    """Load GuardConfig, reading a .env file first when one exists.

    Variables already present in the process environment win over the file.

    Args:
        dotenv_path: Explicit .env file. Defaults to searching from the
            working directory upwards.

    Returns:
        Configuration built from the environment.
    """
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return GuardConfig.from_environment()


__all__ = ["load_guard_config"]
