from __future__ import annotations

import json
import logging

import pytest

from samsung_cli import main as main_module
from samsung_cli.config import DEFAULT_CONFIG, load_config
from samsung_cli.main import main
from samsung_cli.model.paths import resolve_paths


@pytest.fixture
def config_file(tmp_path):
    """config.json con todas las rutas apuntando a un árbol temporal."""
    sysfs = tmp_path / "sys"
    driver_entry = sysfs / "drivers" / "SAM0429:00"
    driver_entry.mkdir(parents=True)
    (driver_entry / "usb_charge").write_text("0\n", encoding="utf-8")
    (sysfs / "power").write_text("85\n", encoding="utf-8")

    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "paths": {"power": str(sysfs / "power")},
                "probe": {
                    "udev_dir": str(tmp_path / "dev"),
                    "driver_dir": str(sysfs / "drivers"),
                    "acpi_dir": str(sysfs / "acpi"),
                },
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("samsung_cli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def test_main_reads_configured_path(config_file, capsys):
    assert main(["power", "read"], config_path=config_file) == 0
    assert capsys.readouterr().out == "Current charge threshold: 85%\n"


def test_main_uses_detected_driver_path(config_file, tmp_path, capsys):
    assert main(["usb-charge", "set", "on"], config_path=config_file) == 0
    written = (tmp_path / "sys" / "drivers" / "SAM0429:00" / "usb_charge").read_text(encoding="utf-8")
    assert written == "1"


def test_main_without_arguments_fails(config_file, capsys):
    assert main([], config_path=config_file) == 1
    assert "Usage: samsung-cli" in capsys.readouterr().out


def test_main_help_succeeds(config_file, capsys):
    assert main(["help"], config_path=config_file) == 0


def test_run_exits_with_status(config_file, monkeypatch):
    monkeypatch.setattr(main_module, "main", lambda: 1)
    with pytest.raises(SystemExit) as excinfo:
        main_module.run()
    assert excinfo.value.code == 1


def test_setup_logging_accepts_level_names():
    main_module.setup_logging("debug")
    logger = logging.getLogger("samsung_cli")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    main_module.setup_logging("not-a-level")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_main_survives_null_paths_section(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"paths": None}), encoding="utf-8")
    assert main(["help"], config_path=path) == 0
    assert "Usage: samsung-cli" in capsys.readouterr().out


def test_null_power_path_resolves_to_default(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"paths": {"power": None}}), encoding="utf-8")
    paths = resolve_paths(load_config(path))
    assert paths.power == DEFAULT_CONFIG["paths"]["power"]
