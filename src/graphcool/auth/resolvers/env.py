"""Environment token resolver."""

from __future__ import annotations

import os

from graphcool.auth.base import TokenResolver
from graphcool.config import Cluster
from graphcool.exceptions import AuthenticationError

TOKEN_ENV_VAR = "GRAPHCOOL_TOKEN"


class EnvTokenResolver(TokenResolver):
    async def resolve(self, cluster: Cluster) -> str:
        token = (os.getenv(TOKEN_ENV_VAR) or "").strip()
        if not token:
            raise AuthenticationError(f"{TOKEN_ENV_VAR} is not set or empty")
        return token
