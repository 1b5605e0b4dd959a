from __future__ import annotations

import os
import sys
import unittest
from typing import Any, Sequence
from unittest import mock

from outbound_sms.adapters import africas_talking
from outbound_sms.application.credentials import ConfigurationError

ENV = {
    "AFRICASTALKING_USERNAME": "clinic",
    "SMS_REPLY_TO": "CLINIC",
    "SECRET_AFRICASTALKING_COM": "at-key-123",
}


class FakeSDKClient:
    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def send(
        self, message: str, recipients: Sequence[str], sender_id: str | None = None
    ) -> dict[str, Any]:
        self.calls.append({"message": message, "recipients": list(recipients), "sender_id": sender_id})
        return {
            "SMSMessageData": {
                "Message": "Sent to 1/1 Total Cost: KES 0.8000",
                "Recipients": [
                    {
                        "statusCode": 102,
                        "number": recipients[0],
                        "status": "Success",
                        "cost": "KES 0.8000",
                        "messageId": "ATXid_42",
                    }
                ],
            }
        }


class SendFromEnvTests(unittest.TestCase):
    @mock.patch.dict(os.environ, ENV, clear=True)
    def test_send_uses_env_credentials_and_sdk_client(self) -> None:
        client = FakeSDKClient()

        with mock.patch.object(
            africas_talking, "_get_instance", return_value=client
        ) as get_instance_mock:
            changes = africas_talking.send(
                [{"id": "msg-1", "to": "+254711000000", "content": "hello"}]
            )

        get_instance_mock.assert_called_once_with(
            {"api_key": "at-key-123", "username": "clinic", "from": "CLINIC"}
        )
        self.assertEqual(
            client.calls,
            [{"message": "hello", "recipients": ["+254711000000"], "sender_id": "CLINIC"}],
        )
        self.assertEqual(
            changes,
            [
                {
                    "messageId": "msg-1",
                    "gatewayRef": "ATXid_42",
                    "state": "received-by-gateway",
                    "details": "Queued",
                }
            ],
        )

    @mock.patch.dict(os.environ, {"SECRET_AFRICASTALKING_COM": "at-key-123"}, clear=True)
    def test_send_without_username_raises_and_never_builds_client(self) -> None:
        with mock.patch.object(africas_talking, "_get_instance") as get_instance_mock:
            with self.assertRaises(ConfigurationError) as exc:
                africas_talking.send([{"id": "msg-1", "to": "+254711000000", "content": "x"}])

        self.assertIn("Africa's Talking configuration documentation", str(exc.exception))
        get_instance_mock.assert_not_called()

    @mock.patch.dict(os.environ, {"AFRICASTALKING_USERNAME": "clinic"}, clear=True)
    def test_send_without_api_key_raises(self) -> None:
        with mock.patch.object(africas_talking, "_get_instance") as get_instance_mock:
            with self.assertRaises(ConfigurationError) as exc:
                africas_talking.send([{"id": "msg-1", "to": "+254711000000", "content": "x"}])

        self.assertIn("No api configured", str(exc.exception))
        get_instance_mock.assert_not_called()

    def test_send_reads_credentials_on_every_call(self) -> None:
        client = FakeSDKClient()
        message = {"id": "msg-1", "to": "+254711000000", "content": "x"}

        with mock.patch.object(
            africas_talking, "_get_instance", return_value=client
        ) as get_instance_mock:
            with mock.patch.dict(os.environ, ENV, clear=True):
                africas_talking.send([message])
            with mock.patch.dict(
                os.environ, ENV | {"SECRET_AFRICASTALKING_COM": "rotated"}, clear=True
            ):
                africas_talking.send([message])

        api_keys = [call.args[0]["api_key"] for call in get_instance_mock.call_args_list]
        self.assertEqual(api_keys, ["at-key-123", "rotated"])

    @mock.patch.dict(os.environ, ENV, clear=True)
    def test_send_forwards_timeout_to_sdk_client(self) -> None:
        client = mock.Mock()
        client.send.return_value = FakeSDKClient().send("x", ["+254711000000"])

        with mock.patch.object(africas_talking, "_get_instance", return_value=client):
            changes = africas_talking.send(
                [{"id": "msg-1", "to": "+254711000000", "content": "hello"}], timeout=12
            )

        client.send.assert_called_once_with(
            message="hello", recipients=["+254711000000"], sender_id="CLINIC", timeout=12
        )
        self.assertEqual(changes[0]["details"], "Queued")


class GetInstanceTests(unittest.TestCase):
    def test_get_instance_builds_sms_service(self) -> None:
        service_cls = mock.Mock(name="SMSService")

        with mock.patch.object(africas_talking, "_import_africastalking", return_value=service_cls):
            instance = africas_talking.get_instance(
                {"api_key": "at-key-123", "username": "sandbox", "from": None}
            )

        service_cls.assert_called_once_with("sandbox", "at-key-123")
        self.assertIs(instance, service_cls.return_value)

    def test_missing_sdk_raises_runtime_error(self) -> None:
        with mock.patch.dict(sys.modules, {"africastalking": None, "africastalking.SMS": None}):
            with self.assertRaises(RuntimeError) as exc:
                africas_talking.get_instance({"api_key": "k", "username": "u", "from": None})

        self.assertIn("pip install africastalking", str(exc.exception))


if __name__ == "__main__":
    unittest.main()
