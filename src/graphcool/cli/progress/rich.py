"""Rich-based migration wait display."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.status import Status


class RichMigrationProgress:
    """Spinner shown while a deploy waits for its migration.

    Use as a context manager so the live display is properly started/stopped::

        with RichMigrationProgress("blog@dev", revision=3):
            await client.wait_for_migration("blog", "dev", 3)
    """

    def __init__(self, target: str, revision: int) -> None:
        self._console = Console(stderr=True)
        self._target = target
        self._revision = revision
        self._status: Status | None = None

    def __enter__(self) -> RichMigrationProgress:
        self._status = self._console.status(
            f"[cyan]Applying migration {self._revision}[/] to [bold]{self._target}[/]"
        )
        self._status.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
        if exc_type is None:
            self._console.print(f"[green]✓[/green] Migration {self._revision} applied to {self._target}")
        else:
            self._console.print(f"[red]✗[/red] Migration {self._revision} on {self._target} did not complete")
