"""Credential resolution for the Africa's Talking gateway.

Credentials are resolved on every call, never cached, so configuration and
key rotation take effect without restarting the process.
"""

from __future__ import annotations

from ..types import Credentials, GetSecretFn, GetSettingsFn

SETTINGS_SECTION = "sms"
SECRET_KEY = "africastalking.com"


class ConfigurationError(RuntimeError):
    """Gateway configuration is incomplete; no message can be sent."""


def resolve_credentials(get_settings: GetSettingsFn, get_secret: GetSecretFn) -> Credentials:
    settings = get_settings(SETTINGS_SECTION) or {}
    gateway_settings = settings.get("africas_talking") or {}
    username = gateway_settings.get("username")
    if not username:
        raise ConfigurationError(
            "No username configured. Refer to the Africa's Talking configuration documentation."
        )

    api_key = get_secret(SECRET_KEY)
    if not api_key:
        raise ConfigurationError(
            "No api configured. Refer to the Africa's Talking configuration documentation."
        )

    return {"api_key": api_key, "username": username, "from": settings.get("reply_to")}
