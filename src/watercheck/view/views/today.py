# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.progress_bar import ProgressBar
from rich.table import Table

from watercheck.model.achievement import Achievements
from watercheck.model.progress import ProgressBand
from watercheck.model.water_entry import WaterEntry
from watercheck.repository.id_map import ID_MAP_REPO
from watercheck.service.water_entry import get_entry_time_ago_str, get_entry_time_str
from watercheck.view.messages import achievement_message, progress_message
from watercheck.view.quote import get_random_quote
from watercheck.view.views.header import header


def today_view(
    current_intake: float,
    daily_goal: float,
    progress_ratio: float,
    band: ProgressBand,
    achievements: Achievements,
    entries: list[WaterEntry],
    now: pendulum.DateTime,
) -> None:
    """
    Display today's progress and entries.

    1250 ml of 2500 ml  ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━  50%
    Great progress! You're halfway there! 🌊
    """
    header("today")
    console = Console()

    progress_table = Table.grid(padding=(0, 2))
    progress_table.add_row(
        f"[bold]{int(current_intake)} ml[/bold] of {int(daily_goal)} ml",
        ProgressBar(total=1.0, completed=progress_ratio, width=30),
        f"{int(progress_ratio * 100)}%",
    )
    console.print(Padding(progress_table, (1, 1, 0, 1)))
    console.print(Padding(progress_message(band), (0, 1)))

    message = achievement_message(achievements)
    if message != "":
        console.print(Padding(f"[yellow]{message}[/yellow]", (0, 1)))

    entries_view(entries, now)

    quote = get_random_quote()
    console.print(
        Padding(f"[italic bright_black]{quote}[/italic bright_black]", (0, 1, 1, 1))
    )


def entries_view(entries: list[WaterEntry], now: pendulum.DateTime) -> None:
    entries_table = Table(box=box.SIMPLE)
    entries_table.add_column("id")
    entries_table.add_column("time")
    entries_table.add_column("ago")
    entries_table.add_column("amount", justify="right")

    for entry in entries:
        entries_table.add_row(
            str(ID_MAP_REPO.associate_id("entries", entry["id"])),
            get_entry_time_str(entry),
            get_entry_time_ago_str(entry, now),
            f"{int(entry['amount'])} ml",
        )

    console = Console()
    console.print(entries_table)
