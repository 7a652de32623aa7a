"""Static token resolver."""

from __future__ import annotations

from dataclasses import dataclass

from graphcool.auth.base import TokenResolver
from graphcool.config import Cluster
from graphcool.exceptions import AuthenticationError


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str

    async def resolve(self, cluster: Cluster) -> str:
        resolved = self.token.strip()
        if not resolved:
            raise AuthenticationError("Static token is empty")
        return resolved
