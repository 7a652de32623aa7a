"""Terminal progress displays."""

from graphcool.cli.progress.rich import RichMigrationProgress

__all__ = ["RichMigrationProgress"]
