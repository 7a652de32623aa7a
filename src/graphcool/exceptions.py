"""Custom exception hierarchy for graphcool.

All graphcool exceptions inherit from :class:`GraphcoolError`, making it easy
to catch any client error with a single ``except`` clause while still allowing
callers to handle specific failure modes.
"""

from __future__ import annotations

from typing import Any


class GraphcoolError(Exception):
    """Base exception for all graphcool errors."""


class ConfigError(GraphcoolError):
    """Raised when the config file cannot be read or fails validation."""


class AuthenticationError(GraphcoolError):
    """Raised when no valid token can be resolved for a cluster."""


class ClientError(GraphcoolError):
    """Raised when an API call fails unexpectedly."""


class GraphQLRequestError(ClientError):
    """Raised when a GraphQL response carries an ``errors`` list.

    Attributes:
        errors: Raw error objects returned by the server.
    """

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self.errors = errors
        messages = [str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors]
        super().__init__("; ".join(messages) or "GraphQL request failed")

    @property
    def first_message(self) -> str:
        if not self.errors:
            return ""
        first = self.errors[0]
        return str(first.get("message", "")) if isinstance(first, dict) else str(first)


class ServiceNotFoundError(ClientError):
    """Raised when the cluster does not know the requested service."""


class LocalClusterUnavailableError(ClientError):
    """Raised when a local cluster refuses the connection."""


class ClusterNotFoundError(GraphcoolError):
    """Raised when no configured cluster hosts a service stage."""


class AmbiguousClusterError(GraphcoolError):
    """Raised when more than one cluster hosts the same service stage.

    Attributes:
        clusters: Names of the matching clusters.
    """

    def __init__(self, name: str, stage: str, clusters: list[str]) -> None:
        self.clusters = clusters
        joined = ", ".join(clusters)
        super().__init__(
            f'The service name / stage combination "{name}@{stage}" is ambiguous. It exists in clusters {joined}'
        )


class MigrationTimeoutError(GraphcoolError):
    """Raised when a wait loop gives up before its condition is met."""


class DeploymentRejectedError(GraphcoolError):
    """Raised when the cluster rejects a deploy with validation errors.

    Attributes:
        errors: ``"type.field: description"`` strings, one per rejected item.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        joined = "\n".join(f"  - {e}" for e in errors)
        super().__init__(f"Deploy rejected:\n{joined}")
