"""Fake gateway clients for local smoke tests.

Mental model refresher:
- These stand in for the Africa's Talking SDK client.
- They implement the same `send(message=, recipients=, sender_id=)` call and
  return a response shaped like the gateway's.
"""

from __future__ import annotations

import uuid
from typing import Any, Mapping, Sequence


class ConsoleSMSClient:
    """Print each message and answer with a configurable status code."""

    def __init__(
        self,
        status_code: int = 101,
        status_by_number: Mapping[str, int] | None = None,
    ) -> None:
        self.status_code = status_code
        self.status_by_number = dict(status_by_number or {})

    def send(
        self,
        message: str,
        recipients: Sequence[str],
        sender_id: str | None = None,
    ) -> dict[str, Any]:
        print("[SMS]")
        print(f"to={','.join(recipients)}")
        print(f"from={sender_id}")
        print(f"message={message}")
        return {
            "SMSMessageData": {
                "Message": f"Sent to {len(recipients)}/{len(recipients)}",
                "Recipients": [self._recipient(number) for number in recipients],
            }
        }

    def _recipient(self, number: str) -> dict[str, Any]:
        return {
            "statusCode": self.status_by_number.get(number, self.status_code),
            "number": number,
            "cost": "KES 0.8000",
            "messageId": f"ATXid_{uuid.uuid4().hex}",
        }
