# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from watercheck.id_map import clear_id_map_if_required
from watercheck.repository.configuration import CONFIGURATION_REPO
from watercheck.repository.id_map import ID_MAP_REPO
from watercheck.service.hydration_store import HydrationStore
from watercheck.service.recommendation import get_recommendation
from watercheck.terminal.parse import parse_id_list, parse_timeframe
from watercheck.terminal.store import error_console, open_store
from watercheck.view.views.goal import goal_view, recommendation_view
from watercheck.view.views.history import history_view, statistics_view
from watercheck.view.views.today import today_view


def add(
    amount: Annotated[
        Optional[float],
        typer.Argument(help="milliliters, defaults to the configured amount"),
    ] = None,
    quick: Annotated[
        Optional[int],
        typer.Option("--quick", "-q", help="position in the quick add amounts, from 1"),
    ] = None,
) -> None:
    """Log a drink."""
    config = CONFIGURATION_REPO.get_config()
    if quick is not None:
        quick_add_amounts = config["quick_add_amounts"]
        if not 1 <= quick <= len(quick_add_amounts):
            raise typer.BadParameter(
                f"Choose 1 to {len(quick_add_amounts)}: "
                + ", ".join(f"{int(a)} ml" for a in quick_add_amounts)
            )
        amount = quick_add_amounts[quick - 1]
    elif amount is None:
        amount = config["default_amount"]

    with open_store() as store:
        store.add_entry(amount)
        _show_today(store)


def remove(id: str) -> None:
    """Remove entries logged today, by the ids shown in the today view."""
    ids: list[int] = parse_id_list(id)

    with open_store() as store:
        for entry_id in ids:
            real_id = ID_MAP_REPO.get_real_id("entries", entry_id)
            if real_id is None or store.remove_entry(real_id) is None:
                error_console.print(f"[yellow]No entry with id {entry_id}[/yellow]")
        _show_today(store)


def today() -> None:
    """Show today's progress and entries."""
    with open_store() as store:
        _show_today(store)


def _show_today(store: HydrationStore) -> None:
    clear_id_map_if_required()
    today_view(
        store.current_intake,
        store.daily_goal,
        store.progress_ratio(),
        store.progress_band(),
        store.achievements,
        store.today_entries,
        store.now(),
    )


def goal(
    new_goal: Annotated[
        Optional[float],
        typer.Argument(help="new daily goal in milliliters"),
    ] = None,
) -> None:
    """Show or set the daily goal."""
    with open_store() as store:
        if new_goal is not None:
            store.update_goal(new_goal)
        goal_view(store.daily_goal)


def history(
    timeframe: Annotated[
        str,
        typer.Option("--timeframe", "-tf", help="week, month, year"),
    ] = "week",
) -> None:
    """Show the daily records of a timeframe."""
    parsed_timeframe = parse_timeframe(timeframe)

    with open_store() as store:
        clear_id_map_if_required()
        history_view(
            parsed_timeframe,
            store.get_data_for_timeframe(parsed_timeframe),
            store.daily_goal,
        )


def stats(
    timeframe: Annotated[
        str,
        typer.Option("--timeframe", "-tf", help="week, month, year"),
    ] = "week",
) -> None:
    """Show statistics for a timeframe."""
    parsed_timeframe = parse_timeframe(timeframe)

    with open_store() as store:
        statistics_view(parsed_timeframe, store.get_statistics(parsed_timeframe))


def export(path: Path) -> None:
    """Export today and the history as CSV."""
    with open_store() as store:
        try:
            row_count = store.write_csv(path)
        except OSError as e:
            error_console.print(f"[red]Could not write {path}: {e}[/red]")
            raise typer.Exit(1)
    typer.echo(f"Exported {row_count} days to {path}")


def reset(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="skip the confirmation prompt"),
    ] = False,
) -> None:
    """Delete today's entries and the whole history. The goal is kept."""
    if not yes:
        typer.confirm("Delete all hydration data?", abort=True)

    with open_store() as store:
        store.reset_all_data()
    typer.echo("All hydration data was reset")


def recommend(
    weight: Annotated[float, typer.Option("--weight", "-w", help="kilograms")],
    height: Annotated[float, typer.Option("--height", "-ht", help="centimeters")],
    set_goal: Annotated[
        bool,
        typer.Option("--set-goal", "-sg", help="use the recommendation as daily goal"),
    ] = False,
) -> None:
    """Compute BMI and a recommended daily intake."""
    with open_store() as store:
        recommendation = get_recommendation(weight, height)
        recommendation_view(recommendation)
        if set_goal:
            store.update_goal(recommendation["recommended_intake"])
            goal_view(store.daily_goal)
