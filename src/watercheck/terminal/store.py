# SPDX-License-Identifier: MIT

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console

from watercheck import configuration
from watercheck.repository.configuration import CONFIGURATION_REPO
from watercheck.repository.hydration import (
    HydrationPersistenceError,
    HydrationRepository,
)
from watercheck.service.hydration_store import HydrationStore, StoreClosedError
from watercheck.service.water_entry import HydrationValidationError

error_console = Console(stderr=True)


@contextmanager
def open_store() -> Iterator[HydrationStore]:
    """
    Open the store for one command and report its errors the CLI way.

    Validation and persistence errors are printed and turned into exit code 1.
    """
    config = CONFIGURATION_REPO.get_config()
    try:
        store = HydrationStore(
            HydrationRepository(configuration.DATA_HYDRATION_PATH),
            history_retention_days=config["history_retention_days"],
        )
        with store:
            yield store
    except (
        HydrationValidationError,
        HydrationPersistenceError,
        StoreClosedError,
    ) as e:
        error_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
