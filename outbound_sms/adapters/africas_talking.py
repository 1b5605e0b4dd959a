"""Africa's Talking gateway adapter.

Mental model refresher:
- This module is an outbound adapter.
- It builds the vendor SDK client and wires the application send flow to the
  environment-backed configuration and secret store.
- The SDK's transport is a black box: `send` returns the parsed JSON body,
  and some gateway rejections are raised with that body as the message.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..application.send import send_messages
from ..types import Credentials, Message, StateChange, UnmappedFn
from .settings import get_secret_from_env, get_settings_from_env


def send(
    messages: Sequence[Message],
    *,
    on_unmapped: UnmappedFn | None = None,
    timeout: float | None = None,
) -> list[StateChange]:
    """Send a batch through Africa's Talking and return state changes.

    Credentials are read from the environment on every call. `timeout` is the
    per-request SDK timeout in seconds; the SDK default applies when unset.
    """
    return send_messages(
        messages,
        get_settings=get_settings_from_env,
        get_secret=get_secret_from_env,
        make_client=lambda credentials: _get_instance(credentials),
        on_unmapped=on_unmapped,
        timeout=timeout,
    )


def get_instance(credentials: Credentials) -> Any:
    """Build an SDK SMS service bound to `username` and `api_key`."""
    SMSService = _import_africastalking()
    return SMSService(credentials["username"], credentials["api_key"])


# Module-level indirection so tests can patch client construction.
_get_instance = get_instance


def _import_africastalking() -> Any:
    try:
        from africastalking.SMS import SMSService
    except Exception as exc:
        raise RuntimeError(
            "Africa's Talking support requires `africastalking`. "
            "Install with: pip install africastalking"
        ) from exc
    return SMSService
