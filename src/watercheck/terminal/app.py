# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from watercheck.id_map import set_clear_ids_on_view
from watercheck.terminal import configuration, hydration
from watercheck.terminal.custom_typer import HydrationTyperGroup
from watercheck.view.state import set_show_header

app = typer.Typer(
    cls=HydrationTyperGroup,
    help="watercheck - Daily hydration tracking in the CLI",
    no_args_is_help=True,
)
app.command(name="add, a")(hydration.add)
app.command(name="remove, rm", no_args_is_help=True)(hydration.remove)
app.command(name="today, t")(hydration.today)
app.command(name="goal, g")(hydration.goal)
app.command(name="history, h")(hydration.history)
app.command(name="stats, s")(hydration.stats)
app.command(name="export, ex", no_args_is_help=True)(hydration.export)
app.command(name="recommend, r", no_args_is_help=True)(hydration.recommend)
app.command(name="reset")(hydration.reset)
app.add_typer(configuration.app, name="config, c", help="View or change settings.")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option("--no-header", "-nh", help="Hide the header above views"),
    ] = False,
    clear_ids: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="Renumber rows from 1 on this view, overrides clear_ids_on_view",
            show_default=False,
        ),
    ] = None,
) -> None:
    """
    watercheck - Daily hydration tracking in the CLI

    Log what you drink, follow your daily goal and look back at your history.
    """
    if no_header:
        set_show_header(False)
    if clear_ids is not None:
        set_clear_ids_on_view(clear_ids)


def run() -> None:
    app()
