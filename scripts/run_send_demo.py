#!/usr/bin/env python3
"""Run the batch send flow locally against a console gateway client.

No network and no real credentials: configuration and secret lookups are
served from in-memory values.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from outbound_sms.adapters.fake_clients import ConsoleSMSClient  # noqa: E402
from outbound_sms.application.send import send_messages  # noqa: E402


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    args = parse_args()
    messages = load_messages(args.payload_file)
    client = ConsoleSMSClient(
        status_code=args.status_code,
        status_by_number={"+254700000002": 402, "+254700000003": 403},
    )
    unmapped: list[str] = []

    changes = send_messages(
        messages,
        get_settings=lambda _section: {
            "africas_talking": {"username": "sandbox"},
            "reply_to": args.sender_id,
        },
        get_secret=lambda _key: "demo-api-key",
        make_client=lambda _credentials: client,
        on_unmapped=lambda message, _raw: unmapped.append(str(message.get("id"))),
    )

    print("")
    print("[SUMMARY]")
    for change in changes:
        print(
            f"message_id={change['messageId']} gateway_ref={change['gatewayRef']} "
            f"state={change['state']} details={change['details']}"
        )
    print(f"no_state_change={unmapped}")
    return 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Send a sample batch through the console gateway client."
    )
    parser.add_argument(
        "--payload-file",
        type=Path,
        default=None,
        help="Optional JSON file holding a list of {id, to, content} messages.",
    )
    parser.add_argument(
        "--status-code",
        type=int,
        default=101,
        help="Status code returned for numbers without a fixed demo status.",
    )
    parser.add_argument(
        "--sender-id",
        default=None,
        help="Optional sender id passed as `from`.",
    )
    return parser.parse_args()


def load_messages(payload_file: Path | None) -> list[dict[str, Any]]:
    if payload_file is None:
        return sample_messages()
    with payload_file.open("r", encoding="utf-8") as file_handle:
        return json.load(file_handle)


def sample_messages() -> list[dict[str, Any]]:
    return [
        {"id": "msg-1", "to": "+254700000001", "content": "Your visit is tomorrow."},
        {"id": "msg-2", "to": "+254700000002", "content": "Your visit is tomorrow."},
        {"id": "msg-3", "to": "+254700000003", "content": "Your visit is tomorrow."},
    ]


if __name__ == "__main__":
    sys.exit(main())
