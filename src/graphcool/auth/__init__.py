"""Auth module public exports."""

from graphcool.auth.base import TokenResolver
from graphcool.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
