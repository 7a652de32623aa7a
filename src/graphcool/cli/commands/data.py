"""Data export, import and reset commands."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from graphcool.exceptions import ConfigError, GraphQLRequestError


def _raise_on_errors(result: Any) -> None:
    if isinstance(result, dict) and result.get("errors"):
        raise GraphQLRequestError(result["errors"])


async def run_export(args: argparse.Namespace) -> str:
    import graphcool.cli as cli

    client = cli.build_client(args)
    url = await client.export_project_data(args.project_id)
    cli.console.print(f"Export ready: {url}", highlight=False)
    return url


async def run_import(args: argparse.Namespace) -> Any:
    import graphcool.cli as cli

    try:
        content = Path(args.file).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed reading import file: {args.file}") from exc

    client = cli.build_client(args)
    result = await client.upload(args.name, args.stage, content, token=args.token)
    _raise_on_errors(result)
    cli.console.print_json(json.dumps(result))
    return result


async def run_reset(args: argparse.Namespace) -> Any:
    import graphcool.cli as cli

    client = cli.build_client(args)
    result = await client.reset(args.name, args.stage, token=args.token)
    _raise_on_errors(result)
    cli.console.print(f"Reset data of {args.name}@{args.stage}")
    return result


__all__ = ["run_export", "run_import", "run_reset"]
