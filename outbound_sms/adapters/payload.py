"""Payload adapter functions.

Mental model refresher:
- This is an adapter/edge module.
- It translates queue-shaped data (an outgoing-batch record value) into
  the message dictionaries the send flow expects.
- It validates shape and required fields, but it does not decide outcomes.
"""

from __future__ import annotations

from typing import Any

from ..types import Event, EventDict


def parse_batch_payload(payload: Event) -> EventDict:
    """Normalize an outgoing-batch payload into `{batch_id, messages}`."""
    raw_messages = payload.get("messages")
    if not isinstance(raw_messages, list):
        raise ValueError("Missing required field: messages")

    messages = [
        _parse_message(item, index=index) for index, item in enumerate(raw_messages)
    ]
    return {
        "batch_id": _as_required_str(payload.get("batch_id"), "batch_id"),
        "messages": messages,
    }


def _parse_message(item: Any, *, index: int) -> dict[str, str]:
    if not isinstance(item, dict):
        raise ValueError(f"messages[{index}] must be an object")
    return {
        "id": _as_required_str(item.get("id"), f"messages[{index}].id"),
        "to": _as_required_str(item.get("to"), f"messages[{index}].to"),
        "content": _as_content(item.get("content"), f"messages[{index}].content"),
    }


def _as_required_str(value: Any, field_name: str) -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValueError(f"Missing required field: {field_name}")
    return text


def _as_content(value: Any, field_name: str) -> str:
    if value is None:
        raise ValueError(f"Missing required field: {field_name}")
    return str(value)
