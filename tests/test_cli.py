# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest
from typer.testing import CliRunner

from watercheck import configuration
from watercheck.initialize import initialize
from watercheck.repository.configuration import CONFIGURATION_REPO
from watercheck.repository.hydration import HydrationRepository
from watercheck.repository.id_map import ID_MAP_REPO
from watercheck.terminal.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def app_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(
        configuration, "DATA_HYDRATION_PATH", data_path / "hydration.yaml"
    )
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_path / "id_map.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(ID_MAP_REPO, "_id_map", None)
    monkeypatch.setattr(ID_MAP_REPO, "is_dirty", False)

    initialize()
    return data_path


def _load_state(data_path: Path):
    return HydrationRepository(data_path / "hydration.yaml").load_state()


def test_add_with_explicit_amount(app_paths: Path) -> None:
    result = runner.invoke(app, ["add", "500"])

    assert result.exit_code == 0, result.output
    assert "500 ml" in result.stdout
    assert _load_state(app_paths)["current_intake"] == 500.0


def test_add_uses_configured_default_amount(app_paths: Path) -> None:
    result = runner.invoke(app, ["a"])

    assert result.exit_code == 0, result.output
    assert _load_state(app_paths)["current_intake"] == 250.0


def test_add_rejects_non_positive_amount(app_paths: Path) -> None:
    result = runner.invoke(app, ["add", "--", "-100"])

    assert result.exit_code == 1
    assert _load_state(app_paths)["today_entries"] == []


def test_remove_by_displayed_id(app_paths: Path) -> None:
    runner.invoke(app, ["add", "300"])
    runner.invoke(app, ["add", "200"])
    runner.invoke(app, ["today"])

    # Newest entry is listed first
    result = runner.invoke(app, ["rm", "1"])

    assert result.exit_code == 0, result.output
    state = _load_state(app_paths)
    assert [e["amount"] for e in state["today_entries"]] == [300.0]
    assert state["current_intake"] == 300.0


def test_remove_unknown_id_leaves_state(app_paths: Path) -> None:
    runner.invoke(app, ["add", "300"])

    result = runner.invoke(app, ["remove", "42"])

    assert result.exit_code == 0
    assert _load_state(app_paths)["current_intake"] == 300.0


def test_goal(app_paths: Path) -> None:
    result = runner.invoke(app, ["goal", "3000"])

    assert result.exit_code == 0, result.output
    assert "3000 ml" in result.stdout
    assert "Very Active" in result.stdout
    assert _load_state(app_paths)["daily_goal"] == 3000.0


def test_goal_rejects_zero(app_paths: Path) -> None:
    runner.invoke(app, ["goal", "2000"])

    result = runner.invoke(app, ["goal", "0"])

    assert result.exit_code == 1
    assert _load_state(app_paths)["daily_goal"] == 2000.0


def test_history_and_stats(app_paths: Path) -> None:
    runner.invoke(app, ["add", "1000"])

    history = runner.invoke(app, ["history", "-tf", "m"])
    stats = runner.invoke(app, ["stats", "--timeframe", "year"])
    invalid = runner.invoke(app, ["stats", "--timeframe", "decade"])

    assert history.exit_code == 0, history.output
    assert "1000" in history.stdout
    assert stats.exit_code == 0, stats.output
    assert invalid.exit_code != 0


def test_export(app_paths: Path, tmp_path: Path) -> None:
    runner.invoke(app, ["add", "750"])
    path = tmp_path / "export.csv"

    result = runner.invoke(app, ["export", str(path)])

    assert result.exit_code == 0, result.output
    assert "Exported 1 days" in result.stdout
    lines = path.read_text().splitlines()
    assert lines[0] == "Date,Total Intake (ml),Entries,Goal Met"
    assert lines[1].endswith(",750,1,false")


def test_reset_requires_confirmation(app_paths: Path) -> None:
    runner.invoke(app, ["goal", "3000"])
    runner.invoke(app, ["add", "750"])

    declined = runner.invoke(app, ["reset"], input="n\n")
    assert declined.exit_code == 1
    assert _load_state(app_paths)["current_intake"] == 750.0

    confirmed = runner.invoke(app, ["reset", "--yes"])
    assert confirmed.exit_code == 0, confirmed.output
    state = _load_state(app_paths)
    assert state["current_intake"] == 0
    assert state["today_entries"] == []
    assert state["daily_goal"] == 3000.0


def test_recommend_sets_goal(app_paths: Path) -> None:
    result = runner.invoke(app, ["recommend", "-w", "70", "-ht", "175", "--set-goal"])

    assert result.exit_code == 0, result.output
    assert "Normal weight" in result.stdout
    assert _load_state(app_paths)["daily_goal"] == 2450.0


def test_config_set(app_paths: Path) -> None:
    result = runner.invoke(
        app, ["config", "set", "--default-amount", "330", "--log-level", "info"]
    )

    assert result.exit_code == 0, result.output
    config = CONFIGURATION_REPO.get_config()
    assert config["default_amount"] == 330.0
    assert config["log_level"] == "INFO"


@pytest.mark.parametrize(
    "args, message",
    [
        (["--history-retention-days", "0"], "at least one day"),
        (["--log-level", "verbose"], "Invalid log level"),
        (["--default-amount=-5"], "greater than zero"),
    ],
)
def test_config_set_rejects_invalid_values(
    app_paths: Path, args: list[str], message: str
) -> None:
    result = runner.invoke(app, ["c", "s", *args])

    assert result.exit_code == 1
    assert message in result.stderr
    assert message not in result.stdout
    assert CONFIGURATION_REPO.get_config() == configuration.get_default_configuration()


def test_hand_edited_config_does_not_break_commands(
    app_paths: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    configuration.APP_CONFIG_PATH.write_text(
        "log_level: verbose\n"
        "default_amount: a glass\n"
        "history_retention_days: -1\n"
    )
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)

    initialize()
    add = runner.invoke(app, ["add"])
    view = runner.invoke(app, ["config", "view"])

    assert add.exit_code == 0, add.output
    assert view.exit_code == 0, view.output
    assert _load_state(app_paths)["current_intake"] == 250.0


def test_add_quick_amount(app_paths: Path) -> None:
    result = runner.invoke(app, ["add", "-q", "3"])
    out_of_range = runner.invoke(app, ["add", "--quick", "9"])

    assert result.exit_code == 0, result.output
    assert out_of_range.exit_code != 0
    assert _load_state(app_paths)["current_intake"] == 200.0
