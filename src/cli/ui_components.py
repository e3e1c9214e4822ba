"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Todo se imprime en stderr: stdout queda libre para el CSV del export.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeRemainingColumn,
)
from rich.text import Text

from core.services.transfer import TransferHooks


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Toggl ⥃ CSV", style="bold cyan")
    subtitle = Text("Import/export de registros de tiempo", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


class ImportProgress:
    """Barra de progreso Rich alimentada por `TransferHooks`.

    Solo observa: el import avanza igual con o sin barra.
    """

    def __init__(self, console: Console) -> None:
        self._progress = Progress(
            TextColumn("[cyan]Importing"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeRemainingColumn(),
            console=console,
            transient=False,
        )
        self._task: TaskID | None = None

    def hooks(self) -> TransferHooks:
        return TransferHooks(started=self._start, advanced=self._advance, finished=self.stop)

    def _start(self, total: int) -> None:
        self._progress.start()
        self._task = self._progress.add_task("import", total=total)

    def _advance(self, done: int, total: int) -> None:
        if self._task is not None:
            self._progress.update(self._task, completed=done, total=total)

    def stop(self) -> None:
        if self._task is not None:
            self._progress.stop()
            self._task = None
