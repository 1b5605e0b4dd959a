"""Consumer-handler adapter functions for queued outgoing batches.

Mental model refresher:
- This is the controller-like entrypoint for outgoing-batch processing.
- A queue consumer calls this after receiving a record.
- Flow:
  record -> parse adapter -> send use-case -> publish state changes -> commit
- Messages with no terminal state are simply absent from the published
  changes; redelivery of those is the upstream queue's job.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from ..application.credentials import ConfigurationError
from ..types import EventDict, PublishFn, SendFn
from .payload import parse_batch_payload

Record = Mapping[str, Any]
CommitFn = Callable[[Record], None]
RejectFn = Callable[[Record, str], None]


def handle_message(
    record: Record,
    *,
    send: SendFn,
    publish: PublishFn,
    commit: CommitFn,
    reject: RejectFn | None = None,
) -> dict[str, Any]:
    """Handle one outgoing-batch record and decide commit/no-commit.

    Commit policy:
    - Commit once the batch was sent and its state changes published.
    - Parse failures are rejected (dead-lettered) and never sent.
    - Configuration failures are neither committed nor rejected. The record
      is redelivered only when the consumer restarts or rebalances from the
      last committed offset.
    - Publish failures happen after the gateway accepted the batch, so the
      record is rejected rather than left for redelivery and a second send.
    """
    try:
        payload = _get_record_payload(record)
        batch = parse_batch_payload(payload)
    except Exception as exc:
        error = f"parse_failed: {exc}"
        if reject is not None:
            reject(record, error)
        return _result("parse_failed", record, batch=None, changes=None, error=error)

    try:
        changes = send(batch["messages"])
    except ConfigurationError as exc:
        return _result(
            "configuration_failed",
            record,
            batch=batch,
            changes=None,
            error=f"configuration_failed: {exc}",
        )

    try:
        publish(batch["batch_id"], changes)
    except Exception as exc:
        error = f"publish_failed: {exc}"
        if reject is not None:
            reject(record, error)
        return _result("publish_failed", record, batch=batch, changes=changes, error=error)

    commit(record)
    return _result("processed_and_committed", record, batch=batch, changes=changes, error=None)


def handle_batch(
    records: Sequence[Record],
    *,
    send: SendFn,
    publish: PublishFn,
    commit: CommitFn,
    reject: RejectFn | None = None,
) -> list[dict[str, Any]]:
    """Handle records sequentially using `handle_message`."""
    results: list[dict[str, Any]] = []
    for record in records:
        result = handle_message(
            record,
            send=send,
            publish=publish,
            commit=commit,
            reject=reject,
        )
        results.append(result)
    return results


def _result(
    status: str,
    record: Record,
    *,
    batch: EventDict | None,
    changes: list[dict[str, Any]] | None,
    error: str | None,
) -> dict[str, Any]:
    return {
        "status": status,
        "record_meta": _record_meta(record),
        "batch_id": batch["batch_id"] if batch else None,
        "state_changes": changes,
        "should_commit": status == "processed_and_committed",
        "error": error,
    }


def _get_record_payload(record: Record) -> EventDict:
    payload = record.get("value")
    if not isinstance(payload, dict):
        raise ValueError("record.value must be a dict payload")
    return payload


def _record_meta(record: Record) -> dict[str, Any]:
    return {
        "topic": record.get("topic"),
        "partition": record.get("partition"),
        "offset": record.get("offset"),
    }
