"""Config-file token resolver.

Cluster tokens live next to the cluster hosts in the config file. When a
config path is known the file is re-read on every resolve, so a token written
by another process (e.g. after logging in again) is picked up on retry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from graphcool.auth.base import TokenResolver
from graphcool.config import Cluster, load_config
from graphcool.exceptions import AuthenticationError

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigTokenResolver(TokenResolver):
    config_path: Path | None = None

    async def resolve(self, cluster: Cluster) -> str:
        token = cluster.token
        if self.config_path is not None:
            entry = load_config(self.config_path).clusters.get(cluster.name)
            if entry is not None:
                token = entry.token
            _LOG.debug("Re-read token for cluster %s from %s", cluster.name, self.config_path)

        resolved = (token or "").strip()
        if not resolved:
            raise AuthenticationError(f"No token configured for cluster {cluster.name}")
        return resolved
