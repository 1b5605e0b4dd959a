"""Application layer: credential resolution and batch send orchestration."""

from .credentials import ConfigurationError, resolve_credentials
from .send import send_messages, submit_message

__all__ = [
    "ConfigurationError",
    "resolve_credentials",
    "send_messages",
    "submit_message",
]
