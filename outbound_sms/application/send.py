"""Batch send orchestration for outgoing SMS.

Mental model refresher:
- Application layer coordinates the use-case flow.
- In this project it:
  1) resolves credentials (once per batch)
  2) builds one gateway client
  3) submits each message strictly in sequence
  4) maps every response through the domain status rules
- One failing message must never abort the rest of the batch.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Sequence

from ..domain.status import generate_state_change, get_recipient, get_status
from ..types import (
    GatewayResponse,
    GetSecretFn,
    GetSettingsFn,
    MakeClientFn,
    Message,
    StateChange,
    UnmappedFn,
)
from .credentials import resolve_credentials

logger = logging.getLogger(__name__)


def send_messages(
    messages: Sequence[Message],
    *,
    get_settings: GetSettingsFn,
    get_secret: GetSecretFn,
    make_client: MakeClientFn,
    on_unmapped: UnmappedFn | None = None,
    timeout: float | None = None,
) -> list[StateChange]:
    """Send messages one at a time and return state changes in submission order.

    Raises `ConfigurationError` before any submission when credentials are
    missing. Per-message failures never raise. `timeout` is handed to the
    gateway client for each request when set.
    """
    credentials = resolve_credentials(get_settings, get_secret)
    client = make_client(credentials)

    changes: list[StateChange] = []
    for message in messages:
        change = submit_message(
            client,
            credentials["from"],
            message,
            on_unmapped=on_unmapped,
            timeout=timeout,
        )
        if change is not None:
            changes.append(change)
    return changes


def submit_message(
    client: Any,
    sender_id: str | None,
    message: Message,
    *,
    on_unmapped: UnmappedFn | None = None,
    timeout: float | None = None,
) -> StateChange | None:
    """Submit one message and map the outcome; never raises."""
    request: dict[str, Any] = {
        "message": message.get("content"),
        "recipients": [message.get("to")],
        "sender_id": sender_id,
    }
    if timeout is not None:
        request["timeout"] = timeout

    try:
        raw = client.send(**request)
    except Exception as exc:
        # The SDK raises on some gateway rejections with a valid response body.
        raw = exc
        response = as_gateway_response(exc.args[0] if exc.args else None)
        if get_status(get_recipient(response)) is None:
            logger.error("Error thrown trying to send messages: %r", exc)
            response = None
    else:
        # The SDK hands back the body text unless content-type is exactly JSON.
        response = as_gateway_response(raw)
        if response is None:
            logger.error("Unreadable gateway response for message %r: %r", message.get("id"), raw)

    change = generate_state_change(message, response)
    if change is None and on_unmapped is not None:
        _notify_unmapped(on_unmapped, message, raw)
    return change


def as_gateway_response(payload: Any) -> GatewayResponse | None:
    """Return a send response as a mapping, parsing JSON text or bytes."""
    if isinstance(payload, Mapping):
        return payload
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8", errors="replace")
    if not isinstance(payload, str):
        return None
    try:
        parsed = json.loads(payload)
    except ValueError:
        return None
    return parsed if isinstance(parsed, Mapping) else None


def _notify_unmapped(on_unmapped: UnmappedFn, message: Message, raw: Any) -> None:
    try:
        on_unmapped(message, raw)
    except Exception:
        logger.exception("Unmapped-outcome callback failed for message %r", message.get("id"))
