"""Token resolver factory."""

from __future__ import annotations

from pathlib import Path

from graphcool.auth.base import TokenResolver
from graphcool.auth.resolvers import ConfigTokenResolver, EnvTokenResolver, StaticTokenResolver
from graphcool.config import GraphcoolConfig
from graphcool.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "config": ConfigTokenResolver,
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: GraphcoolConfig, *, config_path: Path | None = None) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "config":
        return ConfigTokenResolver(config_path=config_path)
    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
