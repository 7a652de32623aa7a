"""Shared test fixtures for graphcool tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from graphcool.client import Client
from graphcool.config import Environment, GraphcoolConfig
from tests.fakes.http import Handler, RecordingTransport


@pytest.fixture
def config() -> GraphcoolConfig:
    """A single shared cluster with a token."""
    return GraphcoolConfig.model_validate(
        {"clusters": {"shared": {"host": "https://cluster.example.com", "token": "tok-shared"}}}
    )


@pytest.fixture
def two_cluster_config() -> GraphcoolConfig:
    return GraphcoolConfig.model_validate(
        {
            "clusters": {
                "shared": {"host": "https://cluster.example.com", "token": "tok-shared"},
                "local": {"host": "http://localhost:60000", "token": "tok-local", "local": True},
            },
            "default_cluster": "shared",
        }
    )


@pytest.fixture
def make_client(config: GraphcoolConfig) -> Callable[..., tuple[Client, RecordingTransport]]:
    """Build a Client whose requests go through a RecordingTransport."""

    def factory(
        handler: Handler, *, environment: Environment | None = None, **kwargs: Any
    ) -> tuple[Client, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = Client(environment or Environment(config), transport=transport, poll_interval=0, **kwargs)
        return client, transport

    return factory


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"clusters": {"shared": {"host": "https://cluster.example.com/", "token": "tok-file"}}}),
        encoding="utf-8",
    )
    return path
