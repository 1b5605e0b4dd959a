#!/usr/bin/env python3
"""Run a Kafka-like consumer flow without Kafka."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Sequence

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from outbound_sms.adapters.consumer_handler import handle_batch  # noqa: E402
from outbound_sms.adapters.fake_clients import ConsoleSMSClient  # noqa: E402
from outbound_sms.application.send import send_messages  # noqa: E402


def main() -> int:
    records = sample_records()
    client = ConsoleSMSClient(status_by_number={"+254700000009": 406})
    committed_offsets: list[tuple[int, int]] = []
    rejected_offsets: list[tuple[int, int, str]] = []

    def send(messages: Sequence[dict[str, Any]]) -> list[dict[str, Any]]:
        return send_messages(
            messages,
            get_settings=lambda _section: {"africas_talking": {"username": "sandbox"}},
            get_secret=lambda _key: "demo-api-key",
            make_client=lambda _credentials: client,
        )

    def publish(batch_id: str, changes: list[dict[str, Any]]) -> None:
        print(f"[PUBLISH] batch_id={batch_id} state_changes={changes}")

    def commit(record: dict[str, Any]) -> None:
        partition = int(record.get("partition", -1))
        offset = int(record.get("offset", -1))
        committed_offsets.append((partition, offset))
        print(f"[COMMIT] partition={partition} offset={offset}")

    def reject(record: dict[str, Any], reason: str) -> None:
        partition = int(record.get("partition", -1))
        offset = int(record.get("offset", -1))
        rejected_offsets.append((partition, offset, reason))
        print(f"[NO-COMMIT] partition={partition} offset={offset} reason={reason}")

    results = handle_batch(
        records,
        send=send,
        publish=publish,
        commit=commit,
        reject=reject,
    )

    print("")
    print("[BATCH SUMMARY]")
    for result in results:
        meta = result["record_meta"]
        print(
            f"offset={meta['offset']} status={result['status']} "
            f"should_commit={result['should_commit']} error={result['error']}"
        )

    print("")
    print("[OFFSETS]")
    print(f"committed={committed_offsets}")
    print(f"rejected={rejected_offsets}")
    return 0


def sample_records() -> list[dict[str, Any]]:
    return [
        {
            "topic": "sms.outgoing",
            "partition": 0,
            "offset": 100,
            "value": {
                "batch_id": "batch-100",
                "messages": [
                    {"id": "msg-1", "to": "+254700000001", "content": "Reminder: clinic at 9am."},
                    {"id": "msg-2", "to": "+254700000009", "content": "Reminder: clinic at 9am."},
                ],
            },
        },
        {
            "topic": "sms.outgoing",
            "partition": 0,
            "offset": 101,
            "value": {
                "messages": [
                    {"id": "msg-3", "to": "+254700000003", "content": "Missing batch id."},
                ],
            },
        },
    ]


if __name__ == "__main__":
    sys.exit(main())
