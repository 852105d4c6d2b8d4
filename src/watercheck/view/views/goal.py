# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from watercheck.service.goal import GOAL_PRESETS, get_goal_description
from watercheck.service.recommendation import Recommendation
from watercheck.view.views.header import header


def goal_view(daily_goal: float) -> None:
    header("goal")

    goal_table = Table(box=box.SIMPLE)
    goal_table.add_column("goal", justify="right")
    goal_table.add_column("description")

    goals = sorted(set(GOAL_PRESETS) | {daily_goal})
    for goal in goals:
        row = [f"{int(goal)} ml", get_goal_description(goal)]
        if goal == daily_goal:
            row = [f"[bold cyan]{value}[/bold cyan]" for value in row]
        goal_table.add_row(*row)

    console = Console()
    console.print(goal_table)


def recommendation_view(recommendation: Recommendation) -> None:
    header("recommendation")

    recommendation_table = Table(box=box.SIMPLE)
    recommendation_table.add_column("property")
    recommendation_table.add_column("value")
    recommendation_table.add_row("bmi", f"{recommendation['bmi']:.1f}")
    recommendation_table.add_row("category", recommendation["category"])
    recommendation_table.add_row(
        "recommended intake",
        f"{int(recommendation['recommended_intake'])} ml/day",
    )

    console = Console()
    console.print(recommendation_table)
