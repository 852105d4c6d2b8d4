# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

import pytest
from yaml import safe_dump, safe_load

from watercheck import configuration
from watercheck.repository.configuration import ConfigurationRepository
from watercheck.repository.id_map import IdMapRepository


@pytest.fixture
def app_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", tmp_path / "id_map.yaml")
    return tmp_path


def test_config_missing_keys_get_defaults(app_files: Path) -> None:
    (app_files / "config.yaml").write_text(safe_dump({"default_amount": 330.0}))

    config = ConfigurationRepository().get_config()

    assert config["default_amount"] == 330.0
    assert config["history_retention_days"] is None
    assert config["log_level"] == "WARNING"


@pytest.mark.parametrize(
    "key, stored",
    [
        ("log_level", "verbose"),
        ("log_level", 10),
        ("default_amount", "a glass"),
        ("default_amount", -250),
        ("quick_add_amounts", ["small", 250]),
        ("quick_add_amounts", []),
        ("history_retention_days", 0),
        ("history_retention_days", -7),
        ("show_header", "yes please"),
        ("data_path", 42),
    ],
)
def test_config_invalid_value_falls_back_to_default(
    app_files: Path, caplog: pytest.LogCaptureFixture, key: str, stored: object
) -> None:
    (app_files / "config.yaml").write_text(safe_dump({key: stored}))

    with caplog.at_level(logging.WARNING):
        config = ConfigurationRepository().get_config()

    default = configuration.get_default_configuration()
    assert config[key] == default[key]  # type: ignore[literal-required]
    assert f"Ignoring {key}" in caplog.text


def test_config_valid_values_are_normalized(app_files: Path) -> None:
    (app_files / "config.yaml").write_text(
        safe_dump(
            {
                "log_level": "debug",
                "default_amount": 330,
                "quick_add_amounts": [100, 200.5],
                "history_retention_days": 90,
                "show_header": False,
            }
        )
    )

    config = ConfigurationRepository().get_config()

    assert config["log_level"] == "DEBUG"
    assert config["default_amount"] == 330.0
    assert config["quick_add_amounts"] == [100.0, 200.5]
    assert config["history_retention_days"] == 90
    assert config["show_header"] is False


def test_config_update_is_written_on_flush(app_files: Path) -> None:
    path = app_files / "config.yaml"
    path.write_text(safe_dump(configuration.get_default_configuration()))
    repository = ConfigurationRepository()

    repository.update_config({"history_retention_days": 90})
    assert safe_load(path.read_text())["history_retention_days"] is None

    repository.flush()
    assert safe_load(path.read_text())["history_retention_days"] == 90
    assert not repository.is_dirty


def test_config_update_without_changes_stays_clean(app_files: Path) -> None:
    (app_files / "config.yaml").write_text(safe_dump({}))
    repository = ConfigurationRepository()

    repository.update_config({})

    assert not repository.is_dirty


def test_ids_are_handed_out_in_order(app_files: Path) -> None:
    repository = IdMapRepository()

    assert repository.associate_id("entries", "uuid-a") == 1
    assert repository.associate_id("entries", "uuid-b") == 2
    assert repository.associate_id("entries", "uuid-a") == 1
    assert repository.associate_id("history", "uuid-c") == 1
    assert repository.get_real_id("entries", 2) == "uuid-b"
    assert repository.get_real_id("entries", 3) is None


def test_ids_survive_flush_and_clear(app_files: Path) -> None:
    repository = IdMapRepository()
    repository.associate_id("entries", "uuid-a")
    repository.flush()

    reloaded = IdMapRepository()
    assert reloaded.get_real_id("entries", 1) == "uuid-a"

    reloaded.clear_ids()
    assert reloaded.get_real_id("entries", 1) is None
    assert reloaded.associate_id("entries", "uuid-b") == 1


def test_unknown_entity_type(app_files: Path) -> None:
    with pytest.raises(TypeError):
        IdMapRepository().associate_id("tasks", "uuid-a")  # type: ignore[arg-type]
