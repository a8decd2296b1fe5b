"""Environment variable loaders for configuration."""

from __future__ import annotations

import os


def optional_env_var(name: str) -> str | None:
    """Return the stripped value of ``name``, treating unset and blank alike."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()
