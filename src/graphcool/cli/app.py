"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from graphcool.exceptions import (
    AmbiguousClusterError,
    AuthenticationError,
    ClientError,
    ClusterNotFoundError,
    ConfigError,
    DeploymentRejectedError,
    GraphcoolError,
    MigrationTimeoutError,
)


def main(argv: list[str] | None = None) -> int:
    import graphcool.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    command = cli.COMMANDS[args.command]
    try:
        cli.asyncio.run(command(args))
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ClientError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (ClusterNotFoundError, AmbiguousClusterError, MigrationTimeoutError, DeploymentRejectedError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except GraphcoolError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("error: interrupted", file=sys.stderr)
        return 130


__all__ = ["main"]
