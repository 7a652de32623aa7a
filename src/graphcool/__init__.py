"""Public API surface for graphcool."""

__version__ = "1.0.0"

from graphcool.auth import TokenResolver, create_token_resolver
from graphcool.client import Client, RetryingTransport
from graphcool.config import Cluster, Environment, GraphcoolConfig, load_config, load_environment
from graphcool.exceptions import (
    AmbiguousClusterError,
    AuthenticationError,
    ClientError,
    ClusterNotFoundError,
    ConfigError,
    DeploymentRejectedError,
    GraphcoolError,
    GraphQLRequestError,
    LocalClusterUnavailableError,
    MigrationTimeoutError,
    ServiceNotFoundError,
)
from graphcool.models import (
    PAT,
    AuthenticateCustomerPayload,
    DeployError,
    DeployPayload,
    FunctionInfo,
    FunctionLog,
    Migration,
    MigrationStatus,
    Project,
    SimpleProjectInfo,
)

__all__ = [
    "PAT",
    "AmbiguousClusterError",
    "AuthenticateCustomerPayload",
    "AuthenticationError",
    "Client",
    "ClientError",
    "Cluster",
    "ClusterNotFoundError",
    "ConfigError",
    "DeployError",
    "DeployPayload",
    "DeploymentRejectedError",
    "Environment",
    "FunctionInfo",
    "FunctionLog",
    "GraphQLRequestError",
    "GraphcoolConfig",
    "GraphcoolError",
    "LocalClusterUnavailableError",
    "Migration",
    "MigrationStatus",
    "MigrationTimeoutError",
    "Project",
    "RetryingTransport",
    "ServiceNotFoundError",
    "SimpleProjectInfo",
    "TokenResolver",
    "__version__",
    "create_token_resolver",
    "load_config",
    "load_environment",
]
