# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.table import Table

from watercheck.model.daily_data import DailyData
from watercheck.model.statistics import Statistics
from watercheck.model.timeframe import Timeframe
from watercheck.repository.id_map import ID_MAP_REPO
from watercheck.time import date_to_display_str
from watercheck.view.views.header import header


def history_view(
    timeframe: Timeframe,
    data: list[DailyData],
    daily_goal: float,
) -> None:
    header(f"history ({timeframe})")

    history_table = Table(box=box.SIMPLE)
    history_table.add_column("id")
    history_table.add_column("date")
    history_table.add_column("intake", justify="right")
    history_table.add_column("entries", justify="right")
    history_table.add_column("goal")

    for daily_data in data:
        goal_state = "[green]✓[/green]" if daily_data["goal_met"] else "[red]✗[/red]"
        history_table.add_row(
            str(ID_MAP_REPO.associate_id("history", daily_data["id"])),
            date_to_display_str(daily_data["date"]),
            f"{int(daily_data['total_intake'])} ml",
            str(daily_data["entry_count"]),
            goal_state,
        )

    console = Console()
    console.print(history_table)
    console.print(Padding(f"current goal: {int(daily_goal)} ml", (0, 1, 1, 1)))


def statistics_view(timeframe: Timeframe, statistics: Statistics) -> None:
    header(f"statistics ({timeframe})")

    statistics_table = Table(box=box.SIMPLE)
    statistics_table.add_column("statistic")
    statistics_table.add_column("value", justify="right")
    statistics_table.add_row("average", f"{int(statistics['average_intake'])} ml")
    statistics_table.add_row("best day", f"{int(statistics['best_day_intake'])} ml")
    statistics_table.add_row(
        "goal met",
        f"{statistics['goal_met_days']} / {statistics['total_days']} days",
    )
    statistics_table.add_row(
        "success rate", f"{statistics['goal_met_percentage']:.0f}%"
    )

    console = Console()
    console.print(statistics_table)
