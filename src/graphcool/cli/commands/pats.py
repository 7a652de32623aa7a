"""Permanent auth token listing."""

from __future__ import annotations

import argparse

from rich.table import Table

from graphcool.models import PAT


def pats_table(pats: list[PAT]) -> Table:
    table = Table(title="Permanent auth tokens")
    table.add_column("Name")
    table.add_column("Id")
    table.add_column("Token", overflow="fold")
    for pat in pats:
        table.add_row(pat.name, pat.id, pat.token)
    return table


async def run_pats(args: argparse.Namespace) -> list[PAT]:
    import graphcool.cli as cli

    client = cli.build_client(args)
    pats = await client.get_pats(args.project_id)
    if not pats:
        cli.console.print("No permanent auth tokens")
    else:
        cli.console.print(pats_table(pats))
    return pats


__all__ = ["pats_table", "run_pats"]
