"""Environment-variable backed configuration and secret-store adapters.

Mental model refresher:
- This module is an inbound config adapter.
- Application code only sees `get_settings(section)` and `get_secret(key)`
  callables; it does not know the values come from the environment.
- Values are read on every call, so updating the environment (or a mounted
  `.env` reloaded by the process) is picked up on the next batch.
"""

from __future__ import annotations

import os
import re
from typing import Any

_SECRET_ENV_PREFIX = "SECRET_"


def get_settings_from_env(section: str) -> dict[str, Any] | None:
    """Return a configuration section; only `sms` is known."""
    if section != "sms":
        return None
    return {
        "africas_talking": {"username": _optional_env("AFRICASTALKING_USERNAME")},
        "reply_to": _optional_env("SMS_REPLY_TO"),
    }


def get_secret_from_env(key: str) -> str | None:
    """Look up a secret by provider key, e.g. `africastalking.com`.

    The key maps to `SECRET_<KEY>` with non-alphanumerics replaced by `_`.
    """
    return _optional_env(secret_env_name(key))


def secret_env_name(key: str) -> str:
    normalized = re.sub(r"[^A-Za-z0-9]+", "_", key.strip()).strip("_").upper()
    if not normalized:
        raise ValueError(f"Invalid secret key: {key!r}")
    return f"{_SECRET_ENV_PREFIX}{normalized}"


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()
