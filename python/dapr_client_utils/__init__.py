"""Helpers used by the Python Dapr client to resolve options and shape requests."""
from __future__ import annotations

from . import proto
from .endpoint import AddressShape, parse_endpoint
from .exceptions import (
    DaprClientError,
    InvalidAddressError,
    InvalidPortError,
    ParseError,
)
from .models import (
    BulkPublishApiResponse,
    BulkPublishEntry,
    BulkPublishFailedEntry,
    BulkPublishFailedMessage,
    BulkPublishResponse,
    ClientOptions,
    CommunicationProtocol,
    ConfigurationItem,
    EndpointTuple,
    LoggerOptions,
    PartialClientOptions,
    QueryParamGroup,
    StateConcurrency,
    StateConsistency,
)
from .options import get_client_options
from .pubsub import get_bulk_publish_entries, get_bulk_publish_response
from .settings import Settings
from .utils import (
    add_metadata_to_map,
    create_configuration_type,
    create_http_query_param,
    get_content_type,
    get_state_concurrency_value,
    get_state_consistency_value,
    is_cloud_event,
)

__all__ = [
    "proto",
    "AddressShape",
    "parse_endpoint",
    "DaprClientError",
    "InvalidAddressError",
    "InvalidPortError",
    "ParseError",
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
    "get_client_options",
    "get_bulk_publish_entries",
    "get_bulk_publish_response",
    "Settings",
    "add_metadata_to_map",
    "create_configuration_type",
    "create_http_query_param",
    "get_content_type",
    "get_state_concurrency_value",
    "get_state_consistency_value",
    "is_cloud_event",
]
