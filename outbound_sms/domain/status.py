"""Africa's Talking status taxonomy and response mapping.

Mental model refresher:
- Domain modules hold the gateway's business rules.
- This one knows what each documented recipient status code means and
  whether a message has reached a terminal state.
- It does not talk to the gateway or read configuration.

Status codes: https://developers.africastalking.com/docs/sms/sending
"""

from __future__ import annotations

from typing import Any, Mapping

from ..types import GatewayResponse, Message, StateChange, StatusEntry


def _entry(success: bool, state: str, detail: str, retry: bool = False) -> StatusEntry:
    return {"success": success, "state": state, "detail": detail, "retry": retry}


STATUS_MAP: dict[int, StatusEntry] = {
    # success
    100: _entry(True, "forwarded-by-gateway", "Processed"),
    101: _entry(True, "sent", "Sent"),
    102: _entry(True, "received-by-gateway", "Queued"),
    # failure
    401: _entry(False, "failed", "RiskHold"),
    402: _entry(False, "failed", "InvalidSenderId", retry=True),
    403: _entry(False, "failed", "InvalidPhoneNumber"),
    404: _entry(False, "failed", "UnsupportedNumberType"),
    405: _entry(False, "failed", "InsufficientBalance", retry=True),
    406: _entry(False, "denied", "UserInBlacklist"),
    407: _entry(False, "failed", "CouldNotRoute"),
    500: _entry(False, "failed", "InternalServerError", retry=True),
    501: _entry(False, "failed", "GatewayError", retry=True),
    502: _entry(False, "failed", "RejectedByGateway", retry=True),
}


def get_recipient(response: Any) -> Mapping[str, Any] | None:
    """Return the first recipient record of a send response, if any."""
    if not isinstance(response, Mapping):
        return None
    data = response.get("SMSMessageData")
    if not isinstance(data, Mapping):
        return None
    recipients = data.get("Recipients")
    if not isinstance(recipients, list) or not recipients:
        return None
    recipient = recipients[0]
    return recipient if isinstance(recipient, Mapping) else None


def get_status(recipient: Any) -> StatusEntry | None:
    """Look up the status entry for a recipient record's `statusCode`."""
    if not isinstance(recipient, Mapping):
        return None
    code = _as_status_code(recipient.get("statusCode"))
    if code is None:
        return None
    entry = STATUS_MAP.get(code)
    return dict(entry) if entry is not None else None


map_status = get_status


def generate_state_change(
    message: Message, response: GatewayResponse | None
) -> StateChange | None:
    """Map one send response to a state change.

    Returns None when there is no recipient, the status code is unknown, or
    the status is retryable; retries belong to the caller's queue.
    """
    recipient = get_recipient(response)
    if recipient is None:
        return None
    status = get_status(recipient)
    if status is None or status["retry"]:
        return None
    return {
        "messageId": message.get("id"),
        "gatewayRef": recipient.get("messageId"),
        "state": status["state"],
        "details": status["detail"],
    }


def _as_status_code(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None
