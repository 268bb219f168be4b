"""High level data structures shared by the client helpers."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List, Literal, NamedTuple, Optional


class CommunicationProtocol(IntEnum):
    HTTP = 0
    GRPC = 1


class StateConsistency(IntEnum):
    UNSPECIFIED = 0
    EVENTUAL = 1
    STRONG = 2


class StateConcurrency(IntEnum):
    UNSPECIFIED = 0
    FIRST_WRITE = 1
    LAST_WRITE = 2


class EndpointTuple(NamedTuple):
    """Scheme, host and port extracted from an endpoint string."""

    scheme: str
    host: str
    port: int


@dataclass(slots=True)
class LoggerOptions:
    level: int = logging.INFO
    service: Optional[logging.Logger] = None


@dataclass(slots=True)
class PartialClientOptions:
    """Options as supplied by the caller; anything left as None gets a default."""

    host: Optional[str] = None
    port: Optional[str] = None
    communication_protocol: Optional[CommunicationProtocol] = None
    is_keep_alive: Optional[bool] = None
    logger: Optional[LoggerOptions] = None
    actor: Optional[Any] = None
    api_token: Optional[str] = None
    max_body_size_mb: Optional[int] = None


@dataclass(frozen=True, slots=True)
class ClientOptions:
    host: str
    port: str
    communication_protocol: CommunicationProtocol
    is_keep_alive: Optional[bool] = None
    logger: Optional[LoggerOptions] = None
    actor: Optional[Any] = None
    api_token: Optional[str] = field(default=None, repr=False)
    max_body_size_mb: Optional[int] = None


@dataclass(slots=True)
class QueryParamGroup:
    data: Optional[dict[str, Optional[str]]] = None
    type: Optional[Literal["metadata"]] = None


@dataclass(slots=True)
class ConfigurationItem:
    key: str
    value: str
    version: str
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class BulkPublishEntry:
    event: Any
    entry_id: Optional[str] = None
    content_type: Optional[str] = None
    metadata: Optional[dict[str, str]] = None


@dataclass(slots=True)
class BulkPublishFailedEntry:
    entry_id: str
    error: str


@dataclass(slots=True)
class BulkPublishApiResponse:
    failed_entries: List[BulkPublishFailedEntry] = field(default_factory=list)


@dataclass(slots=True)
class BulkPublishFailedMessage:
    message: BulkPublishEntry
    error: Exception


@dataclass(slots=True)
class BulkPublishResponse:
    failed_messages: List[BulkPublishFailedMessage] = field(default_factory=list)


__all__ = [
    "BulkPublishApiResponse",
    "BulkPublishEntry",
    "BulkPublishFailedEntry",
    "BulkPublishFailedMessage",
    "BulkPublishResponse",
    "ClientOptions",
    "CommunicationProtocol",
    "ConfigurationItem",
    "EndpointTuple",
    "LoggerOptions",
    "PartialClientOptions",
    "QueryParamGroup",
    "StateConcurrency",
    "StateConsistency",
]
