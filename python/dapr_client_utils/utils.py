"""Utility helpers shared across the SDK."""
from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Literal, Optional
from urllib.parse import urlencode

from . import proto
from .models import ConfigurationItem, QueryParamGroup, StateConcurrency, StateConsistency

CLOUD_EVENT_ATTRIBUTES = ("id", "source", "type", "specversion")

CONTENT_TYPE_CLOUD_EVENT = "application/cloudevents+json"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_TEXT = "text/plain"
CONTENT_TYPE_BINARY = "application/octet-stream"


def add_metadata_to_map(target: MutableMapping[str, str], metadata: Optional[Mapping[str, str]] = None) -> None:
    """Copy ``metadata`` into ``target``, e.g. the metadata map of a request message."""

    for key, value in (metadata or {}).items():
        target[key] = value


def create_http_query_param(*groups: QueryParamGroup) -> str:
    """Build a query string (without the leading ``?``) from one or more groups.

    Keys of a group typed ``"metadata"`` are prefixed with ``metadata.``.
    ``None`` values are skipped and a repeated key keeps its first position
    but takes the last value.
    """

    params: dict[str, str] = {}
    for group in groups:
        if not group or not group.data:
            continue
        for key, value in group.data.items():
            if value is None:
                continue
            name = f"metadata.{key}" if group.type == "metadata" else key
            params[name] = value
    return urlencode(params)


def get_state_consistency_value(c: Optional[StateConsistency]) -> Optional[Literal["eventual", "strong"]]:
    if c == StateConsistency.EVENTUAL:
        return "eventual"
    if c == StateConsistency.STRONG:
        return "strong"
    return None


def get_state_concurrency_value(c: Optional[StateConcurrency]) -> Optional[Literal["first-write", "last-write"]]:
    if c == StateConcurrency.FIRST_WRITE:
        return "first-write"
    if c == StateConcurrency.LAST_WRITE:
        return "last-write"
    return None


def create_configuration_type(items: Mapping[str, proto.ConfigurationItem]) -> dict[str, ConfigurationItem]:
    """Convert ``key -> proto.ConfigurationItem`` into plain :class:`ConfigurationItem` objects."""

    return {
        key: ConfigurationItem(
            key=key,
            value=raw.value,
            version=raw.version,
            metadata=dict(raw.metadata),
        )
        for key, raw in items.items()
    }


def is_cloud_event(data: Any) -> bool:
    return isinstance(data, Mapping) and all(attr in data for attr in CLOUD_EVENT_ATTRIBUTES)


def get_content_type(data: Any) -> str:
    """Infer the Content-Type a payload is published with.

    CloudEvents map to ``application/cloudevents+json``, other mappings and
    lists to ``application/json``, scalars to ``text/plain`` and everything
    else (bytes, buffers, files) to ``application/octet-stream``.
    """

    if isinstance(data, (Mapping, list, tuple)):
        return CONTENT_TYPE_CLOUD_EVENT if is_cloud_event(data) else CONTENT_TYPE_JSON
    if isinstance(data, (bool, int, float, str)):
        return CONTENT_TYPE_TEXT
    return CONTENT_TYPE_BINARY


__all__ = [
    "CONTENT_TYPE_BINARY",
    "CONTENT_TYPE_CLOUD_EVENT",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_TEXT",
    "add_metadata_to_map",
    "create_configuration_type",
    "create_http_query_param",
    "get_content_type",
    "get_state_concurrency_value",
    "get_state_consistency_value",
    "is_cloud_event",
]
