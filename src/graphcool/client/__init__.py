"""Cluster API client."""

from graphcool.client._retrying_transport import RetryingTransport
from graphcool.client.client import DEFAULT_LOG_COUNT, Client, normalize_name

__all__ = ["DEFAULT_LOG_COUNT", "Client", "RetryingTransport", "normalize_name"]
