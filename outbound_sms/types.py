"""Shared type aliases for the outbound SMS package."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

Event = Mapping[str, Any]
EventDict = dict[str, Any]

Message = Mapping[str, Any]
Credentials = dict[str, Any]
Settings = Mapping[str, Any]
GatewayResponse = Mapping[str, Any]
StatusEntry = dict[str, Any]
StateChange = dict[str, Any]

GetSettingsFn = Callable[[str], Settings | None]
GetSecretFn = Callable[[str], str | None]
MakeClientFn = Callable[[Credentials], Any]
UnmappedFn = Callable[[Message, Any], None]
SendFn = Callable[[Sequence[Message]], list[StateChange]]
PublishFn = Callable[[str, list[StateChange]], None]
