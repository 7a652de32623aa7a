"""GraphQL client for the cluster deploy and system APIs."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx
from graphql import get_introspection_query

from graphcool.auth.base import TokenResolver
from graphcool.client import queries
from graphcool.client._retrying_transport import RetryingTransport
from graphcool.config import Cluster, Environment
from graphcool.exceptions import (
    AmbiguousClusterError,
    AuthenticationError,
    ClientError,
    ClusterNotFoundError,
    GraphcoolError,
    GraphQLRequestError,
    LocalClusterUnavailableError,
    MigrationTimeoutError,
    ServiceNotFoundError,
)
from graphcool.models import (
    PAT,
    AuthenticateCustomerPayload,
    DeployPayload,
    FunctionInfo,
    FunctionLog,
    MigrationStatus,
    Project,
    SimpleProjectInfo,
)

_LOG = logging.getLogger(__name__)

DEFAULT_LOG_COUNT = 1000


def normalize_name(name: str) -> str:
    return name.lower().strip()


class Client:
    """Façade over the cluster APIs.

    Every request builds a fresh HTTP client from the environment's active
    cluster, so switching clusters or refreshing a token takes effect on the
    next call.

    Args:
        environment: Configured clusters and the active one.
        token_resolver: Produces bearer tokens; falls back to the cluster's
            own token when omitted.
        transport: httpx transport to send requests through. Defaults to a
            :class:`RetryingTransport`.
        poll_interval: Seconds between polls in the wait loops.
        timeout: HTTP timeout in seconds.
        max_retries: Retries for transient transport failures.
    """

    def __init__(
        self,
        environment: Environment,
        *,
        token_resolver: TokenResolver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        poll_interval: float = 0.5,
        timeout: float = 30.0,
        max_retries: int = 3,
    ) -> None:
        self.env = environment
        self.poll_interval = poll_interval
        self._token_resolver = token_resolver
        self._transport = transport
        self._timeout = timeout
        self._max_retries = max_retries

    # ------------------------------------------------------------------
    # Transport helpers
    # ------------------------------------------------------------------

    def _http_client(self, token: str | None = None) -> httpx.AsyncClient:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        transport = self._transport or RetryingTransport(max_retries=self._max_retries)
        return httpx.AsyncClient(transport=transport, headers=headers, timeout=httpx.Timeout(self._timeout))

    async def _token_for(self, cluster: Cluster) -> str | None:
        if self._token_resolver is None:
            return cluster.token
        return await self._token_resolver.resolve(cluster)

    async def _post(
        self, endpoint: str, *, token: str | None, content: str | bytes, cluster: Cluster | None = None
    ) -> httpx.Response:
        try:
            async with self._http_client(token) as http:
                return await http.post(endpoint, content=content)
        except httpx.ConnectError as exc:
            if cluster is not None and cluster.is_local_host:
                raise LocalClusterUnavailableError(
                    "Could not connect to local cluster. Please use `graphcool local up` "
                    "to start your local Graphcool cluster."
                ) from exc
            raise ClientError(f"Could not connect to {endpoint}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise ClientError(f"Request to {endpoint} failed: {exc}") from exc

    async def _execute(
        self,
        endpoint: str,
        query: str,
        variables: dict[str, Any] | None = None,
        *,
        token: str | None = None,
        cluster: Cluster | None = None,
    ) -> dict[str, Any]:
        _LOG.debug("Sending query to %s", endpoint)
        _LOG.debug("%s", query)
        _LOG.debug("variables: %s", variables)

        body = json.dumps({"query": query, "variables": variables or {}})
        response = await self._post(endpoint, token=token, content=body, cluster=cluster)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ClientError(f"Invalid response from {endpoint} ({response.status_code}): {response.text}") from exc

        if isinstance(payload, dict) and payload.get("errors"):
            raise GraphQLRequestError(payload["errors"])
        if response.is_error:
            raise ClientError(f"Request to {endpoint} failed with status {response.status_code}")

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise ClientError("GraphQL response missing data payload")
        return data

    async def _post_json_body(
        self, endpoint: str, body: str | bytes | dict[str, Any], token: str | None, cluster: Cluster | None = None
    ) -> Any:
        content = json.dumps(body) if isinstance(body, dict) else body
        response = await self._post(endpoint, token=token, content=content, cluster=cluster)
        text = response.text
        try:
            return json.loads(text)
        except ValueError as exc:
            raise ClientError(text) from exc

    # ------------------------------------------------------------------
    # Deploy API
    # ------------------------------------------------------------------

    async def request(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Run ``query`` against the active cluster's deploy endpoint.

        Raises:
            ServiceNotFoundError: The cluster does not know the service.
            LocalClusterUnavailableError: A local cluster refused the connection.
            AuthenticationError: The session stayed invalid after a token refresh.
            GraphQLRequestError: Any other GraphQL error.
        """
        cluster = self.env.active_cluster
        endpoint = cluster.get_deploy_endpoint()
        _LOG.debug("choosing cluster endpoint %s", endpoint)
        token = await self._token_for(cluster)

        try:
            return await self._execute(endpoint, query, variables, token=token, cluster=cluster)
        except GraphQLRequestError as exc:
            if "No service with id" in str(exc):
                raise ServiceNotFoundError(
                    f"{exc.first_message} Please check if you are logged in to the right account."
                ) from exc
            if str(exc).startswith("No valid session"):
                return await self._retry_with_fresh_token(cluster, query, variables)
            raise

    async def _retry_with_fresh_token(
        self, cluster: Cluster, query: str, variables: dict[str, Any] | None
    ) -> dict[str, Any]:
        if self._token_resolver is None:
            raise AuthenticationError(f"No valid session for cluster {cluster.name}")

        _LOG.debug("Session invalid for cluster %s; refreshing token", cluster.name)
        token = await self._token_resolver.resolve(cluster)
        refreshed = self.env.set_cluster_token(cluster.name, token)
        try:
            return await self._execute(
                refreshed.get_deploy_endpoint(), query, variables, token=token, cluster=refreshed
            )
        except GraphQLRequestError as exc:
            if str(exc).startswith("No valid session"):
                raise AuthenticationError(
                    f"No valid session for cluster {cluster.name}. Please log in again."
                ) from exc
            raise

    async def add_project(self, name: str, stage: str, secrets: list[str] | None = None) -> SimpleProjectInfo:
        data = await self.request(queries.ADD_PROJECT_MUTATION, {"name": name, "stage": stage, "secrets": secrets})
        payload = self._require_dict(data, "addProject")
        return SimpleProjectInfo.model_validate(self._require_dict(payload, "project"))

    async def get_deploy_url(self, project_id: str) -> str:
        data = await self.request(queries.GET_DEPLOY_URL_MUTATION, {"projectId": project_id})
        return self._require_str(self._require_dict(data, "getTemporaryDeployUrl"), "url")

    async def deploy(
        self,
        name: str,
        stage: str,
        types: str,
        dry_run: bool = False,
        secrets: list[str] | None = None,
    ) -> DeployPayload:
        data = await self.request(
            queries.DEPLOY_MUTATION,
            {"name": name, "stage": stage, "types": types, "dryRun": dry_run, "secrets": secrets},
        )
        return DeployPayload.model_validate(self._require_dict(data, "deploy"))

    async def list_projects(self) -> list[Project]:
        data = await self.request(queries.LIST_PROJECTS_QUERY)
        return [Project.model_validate(p) for p in self._require_list(data, "listProjects")]

    async def get_cluster(self, name: str, stage: str) -> Cluster | None:
        """Find the single configured cluster hosting ``name@stage``.

        Clusters that fail to answer are skipped.

        Raises:
            AmbiguousClusterError: More than one cluster hosts the stage.
        """
        found: list[Cluster] = []
        for cluster in self.env.clusters:
            try:
                token = await self._token_for(cluster)
                data = await self._execute(
                    cluster.get_deploy_endpoint(),
                    queries.PROJECT_QUERY,
                    {"name": name, "stage": stage},
                    token=token,
                    cluster=cluster,
                )
            except GraphcoolError as exc:
                _LOG.debug("Cluster %s did not answer project lookup: %s", cluster.name, exc)
                continue
            if data.get("project"):
                found.append(cluster)

        if len(found) > 1:
            raise AmbiguousClusterError(name, stage, [c.name for c in found])
        return found[0] if found else None

    async def get_cluster_safe(self, name: str, stage: str) -> Cluster:
        cluster = await self.get_cluster(name, stage)
        if cluster is None:
            raise ClusterNotFoundError(
                f'No cluster for "{name}@{stage}" found. Please make sure to deploy the stage {stage}'
            )
        return cluster

    async def wait_for_local_docker(self, endpoint: str, *, timeout: float | None = None) -> None:
        """Block until ``endpoint`` answers a schema query.

        No credentials are sent. Without ``timeout`` this waits indefinitely.
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        while True:
            try:
                _LOG.debug("requesting %s", endpoint)
                await self._execute(endpoint, queries.SCHEMA_PROBE_QUERY)
                return
            except GraphcoolError as exc:
                _LOG.debug("%s not ready: %s", endpoint, exc)

            if deadline is not None and loop.time() >= deadline:
                raise MigrationTimeoutError(f"{endpoint} did not become ready within {timeout} seconds")
            await asyncio.sleep(self.poll_interval)

    async def get_migration_status(self, name: str, stage: str) -> MigrationStatus:
        data = await self.request(queries.MIGRATION_STATUS_QUERY, {"name": name, "stage": stage})
        return MigrationStatus.model_validate(self._require_dict(data, "migrationStatus"))

    async def wait_for_migration(self, name: str, stage: str, revision: int, *, timeout: float | None = None) -> None:
        """Poll the migration status until ``revision`` has been applied.

        Without ``timeout`` this waits indefinitely; request errors propagate.
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        while True:
            status = await self.get_migration_status(name, stage)
            _LOG.debug(
                "migration status for %s@%s: revision=%d applied=%s",
                name,
                stage,
                status.revision,
                status.has_been_applied,
            )
            if status.reached(revision):
                return

            if deadline is not None and loop.time() >= deadline:
                raise MigrationTimeoutError(
                    f"Migration {revision} of {name}@{stage} was not applied within {timeout} seconds"
                )
            await asyncio.sleep(self.poll_interval)

    async def authenticate_customer(self, endpoint: str, token: str) -> AuthenticateCustomerPayload:
        data = await self._execute(endpoint, queries.AUTHENTICATE_CUSTOMER_MUTATION, {"token": token})
        return AuthenticateCustomerPayload.model_validate(self._require_dict(data, "authenticateCustomer"))

    # ------------------------------------------------------------------
    # System API
    # ------------------------------------------------------------------

    async def get_pats(self, project_id: str) -> list[PAT]:
        data = await self.request(queries.PATS_QUERY, {"projectId": project_id})
        project = self._viewer_project(data)
        tokens = project.get("permanentAuthTokens")
        if not tokens:
            return []
        return [PAT.model_validate(edge["node"]) for edge in self._require_list(tokens, "edges")]

    async def get_functions(self, project_id: str) -> list[FunctionInfo]:
        data = await self.request(queries.FUNCTIONS_QUERY, {"projectId": project_id})
        functions = self._require_dict(self._viewer_project(data), "functions")
        return [FunctionInfo.model_validate(edge["node"]) for edge in self._require_list(functions, "edges")]

    async def get_function(self, project_id: str, function_name: str) -> FunctionInfo | None:
        wanted = normalize_name(function_name)
        for function in await self.get_functions(project_id):
            if normalize_name(function.name) == wanted:
                return function
        return None

    async def get_function_logs(self, function_id: str, count: int = DEFAULT_LOG_COUNT) -> list[FunctionLog] | None:
        data = await self.request(queries.FUNCTION_LOGS_QUERY, {"id": function_id, "count": count})
        node = data.get("node")
        if not node or not node.get("logs"):
            return None
        return [FunctionLog.model_validate(edge["node"]) for edge in node["logs"].get("edges") or []]

    async def get_all_function_logs(self, project_id: str, count: int = DEFAULT_LOG_COUNT) -> list[FunctionLog] | None:
        data = await self.request(queries.ALL_FUNCTION_LOGS_QUERY, {"id": project_id, "count": count})
        project = (data.get("viewer") or {}).get("project")
        functions = (project or {}).get("functions")
        if not functions or not functions.get("edges"):
            return None
        return [
            FunctionLog.model_validate(log_edge["node"])
            for function_edge in functions["edges"]
            for log_edge in ((function_edge.get("node") or {}).get("logs") or {}).get("edges") or []
        ]

    async def get_project_name(self, project_id: str) -> str:
        data = await self.request(queries.PROJECT_NAME_QUERY, {"projectId": project_id})
        return self._require_str(self._viewer_project(data), "name")

    async def delete_projects(self, project_ids: list[str]) -> list[str]:
        if not project_ids:
            return []
        mutation, variables = queries.build_delete_projects_mutation(project_ids)
        data = await self.request(mutation, variables)
        return [
            self._require_str(self._require_dict(data, queries.delete_projects_alias(i)), "deletedId")
            for i in range(len(project_ids))
        ]

    async def export_project_data(self, project_id: str) -> str:
        data = await self.request(queries.EXPORT_DATA_MUTATION, {"projectId": project_id})
        return self._require_str(self._require_dict(data, "exportData"), "url")

    # ------------------------------------------------------------------
    # Service API
    # ------------------------------------------------------------------

    async def introspect(self, service_name: str, stage: str, token: str | None = None) -> dict[str, Any]:
        _LOG.debug("introspecting %s@%s", service_name, stage)
        cluster = self.env.active_cluster
        endpoint = cluster.get_api_endpoint(service_name, stage)
        query = get_introspection_query(descriptions=True)
        return await self._execute(endpoint, query, token=token, cluster=cluster)

    async def download(
        self, service_name: str, stage: str, export_data: str | bytes | dict[str, Any], token: str | None = None
    ) -> Any:
        cluster = self.env.active_cluster
        endpoint = cluster.get_export_endpoint(service_name, stage)
        _LOG.debug("Downloading from %s", endpoint)
        _LOG.debug("%s", export_data)
        return await self._post_json_body(endpoint, export_data, token, cluster)

    async def upload(
        self, service_name: str, stage: str, import_data: str | bytes | dict[str, Any], token: str | None = None
    ) -> Any:
        cluster = self.env.active_cluster
        endpoint = cluster.get_import_endpoint(service_name, stage)
        _LOG.debug("Uploading to %s", endpoint)
        return await self._post_json_body(endpoint, import_data, token, cluster)

    async def reset(self, service_name: str, stage: str, token: str | None = None) -> Any:
        cluster = self.env.active_cluster
        endpoint = cluster.get_api_endpoint(service_name, stage)
        return await self._post_json_body(endpoint, {"query": queries.RESET_DATA_MUTATION}, token, cluster)

    # ------------------------------------------------------------------
    # Payload helpers
    # ------------------------------------------------------------------

    def _viewer_project(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._require_dict(self._require_dict(data, "viewer"), "project")

    @staticmethod
    def _require_dict(data: dict[str, Any], key: str) -> dict[str, Any]:
        value = data.get(key)
        if not isinstance(value, dict):
            raise ClientError(f"Missing/invalid object at key '{key}'")
        return value

    @staticmethod
    def _require_list(data: dict[str, Any], key: str) -> list[Any]:
        value = data.get(key)
        if not isinstance(value, list):
            raise ClientError(f"Missing/invalid list at key '{key}'")
        return value

    @staticmethod
    def _require_str(data: dict[str, Any], key: str) -> str:
        value = data.get(key)
        if not isinstance(value, str):
            raise ClientError(f"Missing/invalid string at key '{key}'")
        return value
