from __future__ import annotations

import os

import pytest

from dapr_client_utils import Settings


@pytest.fixture(autouse=True)
def clean_dapr_env(monkeypatch):
    for name in list(os.environ):
        if name.upper().startswith("DAPR_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def make_settings():
    def factory(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return factory
