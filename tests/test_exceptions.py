"""Tests for graphcool exception hierarchy."""

from __future__ import annotations

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


class TestExceptionHierarchy:
    def test_all_exceptions_inherit_from_graphcool_error(self) -> None:
        for exc_type in (
            AmbiguousClusterError,
            AuthenticationError,
            ClientError,
            ClusterNotFoundError,
            ConfigError,
            DeploymentRejectedError,
            MigrationTimeoutError,
        ):
            assert issubclass(exc_type, GraphcoolError)

    def test_request_failures_are_client_errors(self) -> None:
        assert issubclass(GraphQLRequestError, ClientError)
        assert issubclass(ServiceNotFoundError, ClientError)
        assert issubclass(LocalClusterUnavailableError, ClientError)


class TestGraphQLRequestError:
    def test_joins_messages(self) -> None:
        exc = GraphQLRequestError([{"message": "first"}, {"message": "second"}])

        assert str(exc) == "first; second"
        assert exc.first_message == "first"

    def test_handles_empty_list(self) -> None:
        exc = GraphQLRequestError([])

        assert str(exc) == "GraphQL request failed"
        assert exc.first_message == ""


def test_ambiguous_cluster_error_names_clusters() -> None:
    exc = AmbiguousClusterError("blog", "dev", ["shared", "local"])

    assert exc.clusters == ["shared", "local"]
    assert str(exc).endswith("It exists in clusters shared, local")


def test_deployment_rejected_error_formats_message() -> None:
    exc = DeploymentRejectedError(["Post.title: Unknown type", "User: Duplicate model"])

    assert exc.errors == ["Post.title: Unknown type", "User: Duplicate model"]
    assert "  - Post.title: Unknown type" in str(exc)
