"""Concrete token resolvers."""

from graphcool.auth.resolvers.config import ConfigTokenResolver
from graphcool.auth.resolvers.env import EnvTokenResolver
from graphcool.auth.resolvers.static import StaticTokenResolver

__all__ = ["ConfigTokenResolver", "EnvTokenResolver", "StaticTokenResolver"]
