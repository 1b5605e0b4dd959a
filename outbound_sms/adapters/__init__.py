"""Adapter layer: gateway client, config sources, and transport glue."""

from .africas_talking import get_instance, send
from .consumer_handler import handle_batch, handle_message
from .fake_clients import ConsoleSMSClient
from .payload import parse_batch_payload
from .settings import get_secret_from_env, get_settings_from_env

__all__ = [
    "ConsoleSMSClient",
    "get_instance",
    "get_secret_from_env",
    "get_settings_from_env",
    "handle_batch",
    "handle_message",
    "parse_batch_payload",
    "send",
]
