"""Project listing and deletion commands."""

from __future__ import annotations

import argparse

from rich.table import Table

from graphcool.cli.common import plural
from graphcool.models import Project


def projects_table(projects: list[Project]) -> Table:
    table = Table(title="Services")
    table.add_column("Name")
    table.add_column("Stage")
    for project in sorted(projects, key=lambda p: (p.name, p.stage)):
        table.add_row(project.name, project.stage)
    return table


async def run_list(args: argparse.Namespace) -> list[Project]:
    import graphcool.cli as cli

    client = cli.build_client(args)
    projects = await client.list_projects()
    if not projects:
        cli.console.print("No services deployed")
    else:
        cli.console.print(projects_table(projects))
    return projects


async def run_delete(args: argparse.Namespace) -> list[str]:
    import graphcool.cli as cli

    client = cli.build_client(args)
    deleted = await client.delete_projects(list(args.project_ids))
    for project_id in deleted:
        cli.console.print(f"Deleted {project_id}")
    cli.console.print(f"{plural(len(deleted), 'project')} deleted")
    return deleted


__all__ = ["projects_table", "run_delete", "run_list"]
