"""Process-wide defaults for reaching the Dapr sidecar, read from ``DAPR_*`` env vars."""
from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import CommunicationProtocol

DEFAULT_HOST = "127.0.0.1"
DEFAULT_HTTP_PORT = "3500"
DEFAULT_GRPC_PORT = "50001"


class Settings(BaseSettings):
    host: str = DEFAULT_HOST                # DAPR_HOST
    http_port: str = DEFAULT_HTTP_PORT      # DAPR_HTTP_PORT
    grpc_port: str = DEFAULT_GRPC_PORT      # DAPR_GRPC_PORT
    http_endpoint: str = ""                 # DAPR_HTTP_ENDPOINT, e.g. "https://dapr.example.com"
    grpc_endpoint: str = ""                 # DAPR_GRPC_ENDPOINT

    model_config = SettingsConfigDict(
        env_prefix="DAPR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Ports are handed to the transport as given; it rejects unusable ones.
    @field_validator("http_port", "grpc_port", "http_endpoint", "grpc_endpoint")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()

    @field_validator("host")
    @classmethod
    def _default_blank_host(cls, v: str) -> str:
        return v.strip() or DEFAULT_HOST

    def get_default_port(self, protocol: CommunicationProtocol) -> str:
        if protocol == CommunicationProtocol.GRPC:
            return self.grpc_port
        return self.http_port

    def get_default_endpoint(self, protocol: CommunicationProtocol) -> str:
        if protocol == CommunicationProtocol.GRPC:
            return self.grpc_endpoint
        return self.http_endpoint


__all__ = ["DEFAULT_GRPC_PORT", "DEFAULT_HOST", "DEFAULT_HTTP_PORT", "Settings"]
