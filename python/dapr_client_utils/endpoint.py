"""Parsing of free-form sidecar endpoint strings into scheme, host and port."""
from __future__ import annotations

import ipaddress
import logging
import re
from enum import Enum
from typing import Optional, Tuple

from .exceptions import InvalidAddressError, InvalidPortError
from .models import EndpointTuple

_logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "http"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 80
DEFAULT_HTTPS_PORT = 443
MAX_PORT = 65535


class AddressShape(Enum):
    BRACKETED = "bracketed"      # [::1] or [::1]:50001
    HOST_PORT = "host_port"      # localhost:3500 or :3500
    BARE_HOST = "bare_host"      # example.com
    BARE_IPV6 = "bare_ipv6"      # ::1


# Order matters: the first pattern that fully matches the address body wins.
_MATCHERS: Tuple[Tuple[AddressShape, "re.Pattern[str]"], ...] = (
    (AddressShape.BRACKETED, re.compile(r"\[(?P<host>[^\[\]]*)\](?::(?P<port>[^:]*))?")),
    (AddressShape.HOST_PORT, re.compile(r"(?P<host>[^:\[\]]*):(?P<port>[^:]*)")),
    (AddressShape.BARE_HOST, re.compile(r"(?P<host>[^:\[\]]*)")),
    (AddressShape.BARE_IPV6, re.compile(r"(?P<host>[^\[\]]+)")),
)

_PORT_PATTERN = re.compile(r"[0-9]+")


def _is_ipv6(host: str) -> bool:
    try:
        ipaddress.IPv6Address(host)
    except ValueError:
        return False
    return True


def match_address(body: str) -> Optional[Tuple[AddressShape, str, Optional[str]]]:
    """Classify an address body (no scheme, no path) as ``(shape, host, port)``.

    ``port`` is the raw port text, or None when the body carries no port.
    Returns None when the body matches none of the known shapes.
    """

    for shape, pattern in _MATCHERS:
        match = pattern.fullmatch(body)
        if match is None:
            continue
        host = match["host"]
        if shape is AddressShape.BARE_IPV6 and not _is_ipv6(host):
            continue
        return shape, host, match.groupdict().get("port")
    return None


def parse_port(text: str) -> int:
    if not _PORT_PATTERN.fullmatch(text):
        raise InvalidPortError(text)
    port = int(text)
    if port > MAX_PORT:
        raise InvalidPortError(text)
    return port


def parse_endpoint(address: str) -> EndpointTuple:
    """Parse an endpoint such as ``https://dapr.example.com:443/v1.0`` into its parts.

    A missing scheme defaults to ``http``; a missing port defaults to 443 for
    ``https`` and 80 otherwise; a missing host defaults to ``localhost``.
    Anything after the first ``/`` of the address body is treated as a path
    and ignored.
    """

    scheme = DEFAULT_SCHEME
    port = DEFAULT_PORT
    body = address

    scheme_parts = address.split("://")
    if len(scheme_parts) == 2:
        scheme = scheme_parts[0]
        if not scheme:
            _logger.debug("endpoint %r has an empty scheme; using %s", address, DEFAULT_SCHEME)
            scheme = DEFAULT_SCHEME
        if scheme == "https":
            port = DEFAULT_HTTPS_PORT
        body = scheme_parts[1]

    body = body.split("/", 1)[0]

    matched = match_address(body)
    if matched is None:
        raise InvalidAddressError(address)
    shape, host, port_text = matched
    if port_text is not None:
        port = parse_port(port_text)

    endpoint = EndpointTuple(scheme, host or DEFAULT_HOST, port)
    _logger.debug("parsed endpoint %r as %s: %s", address, shape.value, endpoint)
    return endpoint


__all__ = [
    "AddressShape",
    "DEFAULT_HOST",
    "DEFAULT_HTTPS_PORT",
    "DEFAULT_PORT",
    "DEFAULT_SCHEME",
    "match_address",
    "parse_endpoint",
    "parse_port",
]
