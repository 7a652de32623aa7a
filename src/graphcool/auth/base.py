"""Auth resolver interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod

from graphcool.config import Cluster


class TokenResolver(ABC):
    @abstractmethod
    async def resolve(self, cluster: Cluster) -> str:
        """Resolve and return the bearer token for ``cluster``."""
