"""Resolution of user supplied client options against process-wide defaults."""
from __future__ import annotations

import logging
from typing import Optional

from .endpoint import parse_endpoint
from .models import ClientOptions, CommunicationProtocol, EndpointTuple, LoggerOptions, PartialClientOptions
from .settings import Settings

_logger = logging.getLogger(__name__)


def format_endpoint_host(endpoint: EndpointTuple) -> str:
    """Render ``scheme://host``, bracketing IPv6 literals so the result parses again."""

    host = endpoint.host
    if ":" in host:
        host = f"[{host}]"
    return f"{endpoint.scheme}://{host}"


def get_client_options(
    options: Optional[PartialClientOptions],
    default_protocol: CommunicationProtocol,
    default_logger_options: Optional[LoggerOptions] = None,
    settings: Optional[Settings] = None,
) -> ClientOptions:
    """Fill in the options a client needs to reach its sidecar.

    An explicit host or port always wins. Only when neither is given does the
    protocol specific ``DAPR_HTTP_ENDPOINT``/``DAPR_GRPC_ENDPOINT`` default
    apply, in which case the host becomes ``scheme://host``.

    Raises :class:`~dapr_client_utils.exceptions.ParseError` when that
    default endpoint is malformed.
    """

    options = options or PartialClientOptions()
    settings = settings or Settings()
    protocol = options.communication_protocol
    if protocol is None:
        protocol = default_protocol

    endpoint = settings.get_default_endpoint(protocol)
    host = settings.host
    port = settings.get_default_port(protocol)

    if options.host or options.port:
        host = options.host or host
        port = options.port or port
    elif endpoint:
        parsed = parse_endpoint(endpoint)
        host = format_endpoint_host(parsed)
        port = str(parsed.port)
        _logger.debug("using default %s endpoint %r", protocol.name, endpoint)

    _logger.debug("resolved sidecar address host=%s port=%s protocol=%s", host, port, protocol.name)
    return ClientOptions(
        host=host,
        port=port,
        communication_protocol=protocol,
        is_keep_alive=options.is_keep_alive,
        logger=options.logger if options.logger is not None else default_logger_options,
        actor=options.actor,
        api_token=options.api_token,
        max_body_size_mb=options.max_body_size_mb,
    )


__all__ = ["format_endpoint_host", "get_client_options"]
