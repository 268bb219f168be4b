from __future__ import annotations

import pytest

from dapr_client_utils import (
    QueryParamGroup,
    StateConcurrency,
    StateConsistency,
    add_metadata_to_map,
    create_configuration_type,
    create_http_query_param,
    get_content_type,
    get_state_concurrency_value,
    get_state_consistency_value,
    is_cloud_event,
)
from dapr_client_utils import proto
from dapr_client_utils.models import ConfigurationItem


def test_add_metadata_to_map():
    target = {"existing": "1"}
    add_metadata_to_map(target, {"ttlInSeconds": "60", "existing": "2"})
    assert target == {"existing": "2", "ttlInSeconds": "60"}


def test_add_metadata_to_proto_map():
    item = proto.ConfigurationItem()
    add_metadata_to_map(item.metadata, {"a": "b"})
    add_metadata_to_map(item.metadata)
    assert dict(item.metadata) == {"a": "b"}


def test_create_http_query_param():
    query = create_http_query_param(
        QueryParamGroup(data={"key": "value", "skipped": None}),
        QueryParamGroup(data={"partitionKey": "p 1", "ttl": "5"}, type="metadata"),
    )
    assert query == "key=value&metadata.partitionKey=p+1&metadata.ttl=5"


def test_create_http_query_param_skips_empty_groups():
    assert create_http_query_param() == ""
    assert create_http_query_param(QueryParamGroup(), QueryParamGroup(data={})) == ""


def test_create_http_query_param_later_value_wins():
    query = create_http_query_param(
        QueryParamGroup(data={"a": "1", "b": "2"}),
        QueryParamGroup(data={"a": "3"}),
    )
    assert query == "a=3&b=2"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (StateConsistency.EVENTUAL, "eventual"),
        (StateConsistency.STRONG, "strong"),
        (StateConsistency.UNSPECIFIED, None),
        (None, None),
    ],
)
def test_state_consistency_value(value, expected):
    assert get_state_consistency_value(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (StateConcurrency.FIRST_WRITE, "first-write"),
        (StateConcurrency.LAST_WRITE, "last-write"),
        (StateConcurrency.UNSPECIFIED, None),
        (None, None),
    ],
)
def test_state_concurrency_value(value, expected):
    assert get_state_concurrency_value(value) == expected


def test_create_configuration_type():
    items = {
        "feature": proto.ConfigurationItem(value="on", version="3", metadata={"source": "redis"}),
        "limit": proto.ConfigurationItem(value="10"),
    }
    result = create_configuration_type(items)
    assert result == {
        "feature": ConfigurationItem(key="feature", value="on", version="3", metadata={"source": "redis"}),
        "limit": ConfigurationItem(key="limit", value="10", version="", metadata={}),
    }
    assert type(result["feature"].metadata) is dict


def test_is_cloud_event():
    event = {"id": "1", "source": "svc", "type": "order.created", "specversion": "1.0", "data": {}}
    assert is_cloud_event(event)
    assert not is_cloud_event({"id": "1", "source": "svc"})
    assert not is_cloud_event(["id", "source", "type", "specversion"])
    assert not is_cloud_event("id")


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ({"id": "1", "source": "s", "type": "t", "specversion": "1.0"}, "application/cloudevents+json"),
        ({"order": 1}, "application/json"),
        ([1, 2, 3], "application/json"),
        ("hello", "text/plain"),
        (42, "text/plain"),
        (1.5, "text/plain"),
        (True, "text/plain"),
        (b"\x00\x01", "application/octet-stream"),
        (bytearray(b"abc"), "application/octet-stream"),
    ],
)
def test_get_content_type(data, expected):
    assert get_content_type(data) == expected


def test_proto_module_is_exported():
    import dapr_client_utils

    assert dapr_client_utils.proto.ConfigurationItem is proto.ConfigurationItem
