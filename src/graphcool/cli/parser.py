"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from graphcool.client import DEFAULT_LOG_COUNT


def _package_version() -> str:
    try:
        return version("graphcool-cli")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to config.json (default: $GRAPHCOOL_CONFIG or ~/.graphcool)")
    parser.add_argument("--cluster", default=None, help="Cluster to talk to (default: the configured default)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def _add_service(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name", "-n", required=True, help="Service name")
    parser.add_argument("--stage", "-s", required=True, help="Service stage")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="graphcool")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    deploy_parser = subparsers.add_parser("deploy", help="Deploy type definitions to a service stage")
    _add_service(deploy_parser)
    deploy_parser.add_argument("--types", "-t", required=True, help="Path to the type definitions file")
    deploy_parser.add_argument("--dry-run", action="store_true", help="Only compute the migration")
    deploy_parser.add_argument("--secret", action="append", default=None, dest="secrets", help="Service secret")
    deploy_parser.add_argument("--no-wait", action="store_true", help="Do not wait for the migration to apply")
    deploy_parser.add_argument("--timeout", type=float, default=None, help="Seconds to wait for the migration")
    _add_common(deploy_parser)

    list_parser = subparsers.add_parser("list", help="List services on the cluster")
    _add_common(list_parser)

    delete_parser = subparsers.add_parser("delete", help="Delete projects by id")
    delete_parser.add_argument("project_ids", nargs="+", metavar="PROJECT_ID", help="Project ids to delete")
    _add_common(delete_parser)

    logs_parser = subparsers.add_parser("logs", help="Show function logs of a project")
    logs_parser.add_argument("--project-id", required=True, help="Project id")
    logs_parser.add_argument("--function", "-f", default=None, help="Only show logs of this function")
    logs_parser.add_argument("--count", type=int, default=DEFAULT_LOG_COUNT, help="Number of log lines")
    _add_common(logs_parser)

    export_parser = subparsers.add_parser("export", help="Export project data and print the download URL")
    export_parser.add_argument("--project-id", required=True, help="Project id")
    _add_common(export_parser)

    import_parser = subparsers.add_parser("import", help="Import data into a service stage")
    _add_service(import_parser)
    import_parser.add_argument("--file", required=True, help="JSON file to upload")
    import_parser.add_argument("--token", default=None, help="Service token")
    _add_common(import_parser)

    reset_parser = subparsers.add_parser("reset", help="Delete all data of a service stage")
    _add_service(reset_parser)
    reset_parser.add_argument("--token", default=None, help="Service token")
    _add_common(reset_parser)

    pats_parser = subparsers.add_parser("pats", help="List permanent auth tokens of a project")
    pats_parser.add_argument("--project-id", required=True, help="Project id")
    _add_common(pats_parser)

    introspect_parser = subparsers.add_parser("introspect", help="Print the schema of a service stage as SDL")
    _add_service(introspect_parser)
    introspect_parser.add_argument("--token", default=None, help="Service token")
    introspect_parser.add_argument("--output", "-o", default=None, help="Write SDL to this file")
    _add_common(introspect_parser)

    return parser


__all__ = ["build_parser"]
