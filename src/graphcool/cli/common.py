"""Shared CLI helpers."""

from __future__ import annotations

import argparse

from rich.console import Console

from graphcool.auth import create_token_resolver
from graphcool.client import Client
from graphcool.config import Environment, load_config, resolve_config_path

console = Console()


def build_client(args: argparse.Namespace) -> Client:
    config_path = resolve_config_path(args.config)
    config = load_config(config_path)
    environment = Environment(config)
    if args.cluster:
        environment.set_active_cluster(args.cluster)

    return Client(
        environment,
        token_resolver=create_token_resolver(config, config_path=config_path),
        poll_interval=config.poll_interval,
        timeout=config.timeout,
        max_retries=config.max_retries,
    )


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


__all__ = ["build_client", "console", "plural"]
