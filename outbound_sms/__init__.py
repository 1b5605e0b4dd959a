"""Africa's Talking outbound SMS adapter.

Module layout by abstraction layer:
- domain: gateway status taxonomy and response mapping
- application: credential resolution and batch send orchestration
- adapters: SDK client, env config, fake clients, and batch-record glue
"""

from .adapters.africas_talking import get_instance, send
from .adapters.consumer_handler import handle_batch, handle_message
from .adapters.fake_clients import ConsoleSMSClient
from .adapters.payload import parse_batch_payload
from .application.credentials import ConfigurationError, resolve_credentials
from .application.send import send_messages, submit_message
from .domain.status import STATUS_MAP, generate_state_change, get_recipient, get_status, map_status

__all__ = [
    "STATUS_MAP",
    "ConfigurationError",
    "ConsoleSMSClient",
    "generate_state_change",
    "get_instance",
    "get_recipient",
    "get_status",
    "handle_batch",
    "handle_message",
    "map_status",
    "parse_batch_payload",
    "resolve_credentials",
    "send",
    "send_messages",
    "submit_message",
]
