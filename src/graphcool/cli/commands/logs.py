"""Function logs command."""

from __future__ import annotations

import argparse

from graphcool.exceptions import GraphcoolError
from graphcool.models import FunctionLog


def format_log(log: FunctionLog) -> str:
    duration = f"{log.duration:g}ms" if log.duration is not None else "-"
    return f"{log.timestamp or '-'} {log.status or '-':>8} {duration:>8}  {log.message or ''}"


async def run_logs(args: argparse.Namespace) -> list[FunctionLog]:
    import graphcool.cli as cli

    client = cli.build_client(args)
    if args.function:
        function = await client.get_function(args.project_id, args.function)
        if function is None:
            raise GraphcoolError(f"No function named '{args.function}' in project {args.project_id}")
        logs = await client.get_function_logs(function.id, args.count)
    else:
        logs = await client.get_all_function_logs(args.project_id, args.count)

    if not logs:
        cli.console.print("No logs found")
        return []

    for log in sorted(logs, key=lambda entry: entry.timestamp or ""):
        cli.console.print(format_log(log), markup=False, highlight=False)
    return logs


__all__ = ["format_log", "run_logs"]
