"""Demo: keep an application's settings in the user config directory.

Run with:
    uv run python examples/app_config.py

Set APPRES_LOCATION=path and APPRES_PATH=/some/dir to redirect the store.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from appres import Format, ResourceStore, setup_logging

console = Console()


class Settings(BaseModel):
    """Settings persisted between runs."""

    username: str = "guest"
    launches: int = 0
    theme: str = "dark"


def main() -> None:
    setup_logging(level=logging.DEBUG)
    store = ResourceStore.from_settings()

    table = Table(title=f"Resources in {store.base_path}")
    table.add_column("Format", style="cyan")
    table.add_column("File")
    table.add_column("Launches", justify="right")

    for fmt in store.formats:
        name = f"demo/settings.{fmt.value}"
        settings = (
            store.load(fmt, name, Settings) if store.exists(name) else Settings()
        )
        settings.launches += 1
        store.save(fmt, name, settings, pretty=fmt is Format.JSON)
        table.add_row(
            str(fmt), str(store.resolved_path(name)), str(settings.launches)
        )

    console.print(table)


if __name__ == "__main__":
    main()
