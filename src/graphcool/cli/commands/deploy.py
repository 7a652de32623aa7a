"""Deploy command."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from graphcool.exceptions import ClusterNotFoundError, ConfigError, DeploymentRejectedError
from graphcool.models import (
    CreateEnum,
    CreateField,
    CreateModel,
    CreateRelation,
    DeleteEnum,
    DeleteField,
    DeleteModel,
    DeleteRelation,
    DeployPayload,
    MigrationStep,
    UpdateEnum,
    UpdateField,
    UpdateModel,
)

_LOG = logging.getLogger(__name__)


def describe_step(step: MigrationStep) -> str:
    if isinstance(step, CreateField):
        suffix = "!" if step.is_required else ""
        type_name = f"[{step.type_name}]" if step.is_list else step.type_name
        return f"+ {step.kind} {step.model}.{step.name}: {type_name}{suffix}"
    if isinstance(step, (UpdateField, DeleteField)):
        sign = "~" if isinstance(step, UpdateField) else "-"
        return f"{sign} {step.kind} {step.model}.{step.name}"
    if isinstance(step, (UpdateModel, UpdateEnum)) and step.new_name:
        return f"~ {step.kind} {step.name} -> {step.new_name}"
    if isinstance(step, (CreateModel, CreateEnum, CreateRelation)):
        return f"+ {step.kind} {step.name}"
    if isinstance(step, (DeleteModel, DeleteEnum, DeleteRelation)):
        return f"- {step.kind} {step.name}"
    return f"~ {step.kind} {step.name}"


def format_deploy_summary(payload: DeployPayload, *, name: str, stage: str, dry_run: bool) -> str:
    mode = "dry-run" if dry_run else "apply"
    lines = ["", f"graphcool - deploy complete ({mode})", "", f"  Service:   {name}@{stage}"]

    migration = payload.migration
    if migration is None or not migration.steps:
        lines.append("  Status:    service is up to date")
    else:
        lines.append(f"  Revision:  {migration.revision}")
        lines.append(f"  Steps:     {len(migration.steps)}")
        lines.extend(f"    {describe_step(step)}" for step in migration.steps)

    if dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)


def _read_types(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed reading types file: {path}") from exc


async def run_deploy(args: argparse.Namespace) -> DeployPayload:
    import graphcool.cli as cli

    types = _read_types(args.types)
    client = cli.build_client(args)

    if not args.cluster:
        cluster = await client.get_cluster(args.name, args.stage)
        if cluster is not None:
            client.env.set_active_cluster(cluster.name)
        elif args.dry_run:
            raise ClusterNotFoundError(
                f"{args.name}@{args.stage} is not deployed yet; run deploy without --dry-run to create it"
            )
        else:
            _LOG.debug("%s@%s not found on any cluster; creating it", args.name, args.stage)
            await client.add_project(args.name, args.stage, args.secrets)

    payload = await client.deploy(args.name, args.stage, types, args.dry_run, args.secrets)
    if payload.errors:
        raise DeploymentRejectedError(
            [f"{e.type}.{e.field}: {e.description}" if e.field else f"{e.type}: {e.description}" for e in payload.errors]
        )

    migration = payload.migration
    if migration is not None and migration.steps and not args.dry_run and not args.no_wait:
        with cli.RichMigrationProgress(f"{args.name}@{args.stage}", migration.revision):
            await client.wait_for_migration(args.name, args.stage, migration.revision, timeout=args.timeout)

    summary = format_deploy_summary(payload, name=args.name, stage=args.stage, dry_run=args.dry_run)
    cli.console.print(summary, markup=False, highlight=False)
    return payload


__all__ = ["describe_step", "format_deploy_summary", "run_deploy"]
