"""Config contracts, loading, and the cluster environment."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from graphcool.exceptions import ConfigError

_LOG = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GRAPHCOOL_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.graphcool/config.json")

_LOCAL_HOSTS = ("localhost", "127.0.0.1")


class ClusterConfig(BaseModel):
    host: str
    token: str | None = None
    local: bool = False

    model_config = {"frozen": True}

    @field_validator("host")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        host = value.strip().rstrip("/")
        if not host.startswith(("http://", "https://")):
            raise ValueError("host must start with http:// or https://")
        return host


class Cluster(ClusterConfig):
    """A deployment target hosting services and their stages."""

    name: str

    @property
    def is_local_host(self) -> bool:
        return self.local or any(h in self.host for h in _LOCAL_HOSTS)

    def get_deploy_endpoint(self) -> str:
        return f"{self.host}/cluster"

    def get_api_endpoint(self, service_name: str, stage: str) -> str:
        return f"{self.host}/{service_name}/{stage}"

    def get_import_endpoint(self, service_name: str, stage: str) -> str:
        return f"{self.get_api_endpoint(service_name, stage)}/import"

    def get_export_endpoint(self, service_name: str, stage: str) -> str:
        return f"{self.get_api_endpoint(service_name, stage)}/export"


class GraphcoolConfig(BaseModel):
    clusters: dict[str, ClusterConfig] = Field(default_factory=dict)
    default_cluster: str | None = None
    auth: str = "config"
    token: str | None = None
    poll_interval: float = Field(default=0.5, gt=0)
    timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=0, le=10)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> GraphcoolConfig:
        if self.auth not in {"config", "env", "token"}:
            raise ValueError("auth must be one of: config, env, token")
        token = (self.token or "").strip()
        if self.auth == "token" and not token:
            raise ValueError("token auth requires a non-empty token")
        if self.auth != "token" and token:
            raise ValueError("token must be unset when auth is not 'token'")
        return self

    @model_validator(mode="after")
    def validate_default_cluster(self) -> GraphcoolConfig:
        if self.default_cluster is not None and self.default_cluster not in self.clusters:
            raise ValueError(f"default_cluster '{self.default_cluster}' is not a configured cluster")
        return self


class Environment:
    """Configured clusters plus the one requests currently go to."""

    def __init__(self, config: GraphcoolConfig) -> None:
        self.config = config
        self.clusters: list[Cluster] = [
            Cluster(name=name, host=entry.host, token=entry.token, local=entry.local)
            for name, entry in config.clusters.items()
        ]
        self._active_name: str | None = config.default_cluster
        if self._active_name is None and len(self.clusters) == 1:
            self._active_name = self.clusters[0].name

    @property
    def active_cluster(self) -> Cluster:
        if self._active_name is None:
            if not self.clusters:
                raise ConfigError("no clusters configured")
            raise ConfigError("multiple clusters configured; set default_cluster or pass --cluster")
        return self.get_cluster(self._active_name)

    def get_cluster(self, name: str) -> Cluster:
        for cluster in self.clusters:
            if cluster.name == name:
                return cluster
        raise ConfigError(f"unknown cluster: {name}")

    def set_active_cluster(self, name: str) -> None:
        self.get_cluster(name)
        _LOG.debug("Active cluster set to %s", name)
        self._active_name = name

    def set_cluster_token(self, name: str, token: str) -> Cluster:
        """Replace the token of cluster ``name`` and return the updated cluster."""
        for index, cluster in enumerate(self.clusters):
            if cluster.name == name:
                updated = cluster.model_copy(update={"token": token})
                self.clusters[index] = updated
                return updated
        raise ConfigError(f"unknown cluster: {name}")


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    return Path(path).expanduser().resolve()


def load_config(path: str | Path | None = None) -> GraphcoolConfig:
    config_path = resolve_config_path(path)
    _LOG.debug("Loading config from %s", config_path)

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return GraphcoolConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


def load_environment(path: str | Path | None = None) -> Environment:
    return Environment(load_config(path))
