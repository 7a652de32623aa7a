"""Command-line interface for graphcool."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from graphcool.cli.app import main as main
from graphcool.cli.commands import data as data_command
from graphcool.cli.commands import deploy as deploy_command
from graphcool.cli.commands import introspect as introspect_command
from graphcool.cli.commands import logs as logs_command
from graphcool.cli.commands import pats as pats_command
from graphcool.cli.commands import projects as projects_command
from graphcool.cli.common import build_client as build_client
from graphcool.cli.common import console as console
from graphcool.cli.parser import build_parser as build_parser
from graphcool.cli.progress import RichMigrationProgress as RichMigrationProgress

COMMANDS = {
    "deploy": deploy_command.run_deploy,
    "list": projects_command.run_list,
    "delete": projects_command.run_delete,
    "logs": logs_command.run_logs,
    "export": data_command.run_export,
    "import": data_command.run_import,
    "reset": data_command.run_reset,
    "pats": pats_command.run_pats,
    "introspect": introspect_command.run_introspect,
}