"""Domain layer: gateway status rules."""

from .status import (
    STATUS_MAP,
    generate_state_change,
    get_recipient,
    get_status,
    map_status,
)

__all__ = [
    "STATUS_MAP",
    "generate_state_change",
    "get_recipient",
    "get_status",
    "map_status",
]
