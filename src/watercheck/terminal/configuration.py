# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from watercheck import configuration
from watercheck.logger import VALID_LOG_LEVELS, validate_log_level
from watercheck.repository.configuration import (
    CONFIGURATION_REPO,
    ConfigurationUpdate,
)
from watercheck.service.water_entry import (
    validate_positive_quantity,
    validate_retention_days,
)
from watercheck.terminal.custom_typer import AliasedTyperGroup
from watercheck.terminal.store import error_console

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "clear_ids_on_view",
        "✓ Enabled" if config["clear_ids_on_view"] else "✗ Disabled",
    )
    table.add_row("default_amount", f"{int(config['default_amount'])} ml")
    table.add_row(
        "quick_add_amounts",
        ", ".join(str(int(amount)) for amount in config["quick_add_amounts"]),
    )
    table.add_row(
        "history_retention_days",
        str(config["history_retention_days"])
        if config["history_retention_days"] is not None
        else "Unlimited",
    )
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set, s")
def set_config(
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="use the default data path")
    ] = False,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--no-show-header")
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool], typer.Option("--clear-ids-on-view/--no-clear-ids-on-view")
    ] = None,
    default_amount: Annotated[
        Optional[float], typer.Option("--default-amount", help="milliliters")
    ] = None,
    quick_add_amounts: Annotated[
        Optional[list[float]],
        typer.Option("--quick-add-amount", help="repeatable, replaces the list"),
    ] = None,
    history_retention_days: Annotated[
        Optional[int], typer.Option("--history-retention-days")
    ] = None,
    remove_history_retention_days: Annotated[
        bool,
        typer.Option("--remove-history-retention-days", help="keep all history"),
    ] = False,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", help=", ".join(VALID_LOG_LEVELS))
    ] = None,
) -> None:
    """Update configuration settings."""
    changes: ConfigurationUpdate = {}

    if remove_data_path:
        changes["data_path"] = None
    elif data_path is not None:
        changes["data_path"] = data_path
    if show_header is not None:
        changes["show_header"] = show_header
    if clear_ids_on_view is not None:
        changes["clear_ids_on_view"] = clear_ids_on_view

    try:
        if default_amount is not None:
            changes["default_amount"] = validate_positive_quantity(
                "default amount", default_amount
            )
        if quick_add_amounts:
            changes["quick_add_amounts"] = [
                validate_positive_quantity("quick add amount", amount)
                for amount in quick_add_amounts
            ]
        if remove_history_retention_days:
            changes["history_retention_days"] = None
        elif history_retention_days is not None:
            changes["history_retention_days"] = validate_retention_days(
                history_retention_days
            )
        if log_level is not None:
            changes["log_level"] = validate_log_level(log_level)
    except ValueError as e:
        error_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(changes)

    view()
