"""Schema introspection command."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from graphql import build_client_schema, print_schema


def introspection_to_sdl(introspection: dict[str, Any]) -> str:
    """Convert an introspection result (the ``data`` portion) to SDL."""
    return print_schema(build_client_schema(introspection)).strip() + "\n"


async def run_introspect(args: argparse.Namespace) -> str:
    import graphcool.cli as cli

    client = cli.build_client(args)
    introspection = await client.introspect(args.name, args.stage, token=args.token)
    sdl = introspection_to_sdl(introspection)

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(sdl, encoding="utf-8")
        cli.console.print(f"Wrote schema of {args.name}@{args.stage} to {output}")
    else:
        cli.console.print(sdl, markup=False, highlight=False, end="")
    return sdl


__all__ = ["introspection_to_sdl", "run_introspect"]
