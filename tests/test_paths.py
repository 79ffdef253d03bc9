from __future__ import annotations

import os

import pytest

from samsung_cli.config import DEFAULT_CONFIG
from samsung_cli.model.paths import FeaturePaths, detect_feature_path, resolve_paths


@pytest.fixture
def roots(tmp_path):
    udev = tmp_path / "dev" / "samsung-galaxybook"
    driver = tmp_path / "drivers" / "samsung-galaxybook"
    acpi = tmp_path / "acpi" / "SCAI:00"
    return {
        "udev_dir": str(udev),
        "driver_dir": str(driver),
        "driver_prefix": "SAM",
        "acpi_dir": str(acpi),
    }


def _touch(path):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("1\n")


def test_falls_back_to_acpi_path_when_nothing_exists(roots):
    path = detect_feature_path("usb_charge", **roots)
    assert path == os.path.join(roots["acpi_dir"], "usb_charge")


def test_prefers_udev_node(roots):
    udev_path = os.path.join(roots["udev_dir"], "allow_recording")
    _touch(udev_path)
    _touch(os.path.join(roots["driver_dir"], "SAM0429:00", "allow_recording"))
    assert detect_feature_path("allow_recording", **roots) == udev_path


def test_uses_platform_driver_entry_with_prefix(roots):
    _touch(os.path.join(roots["driver_dir"], "bind"))
    _touch(os.path.join(roots["driver_dir"], "OTHER:00", "start_on_lid_open"))
    driver_path = os.path.join(roots["driver_dir"], "SAM0430:00", "start_on_lid_open")
    _touch(driver_path)
    assert detect_feature_path("start_on_lid_open", **roots) == driver_path


def test_driver_entry_without_feature_is_skipped(roots):
    os.makedirs(os.path.join(roots["driver_dir"], "SAM0429:00"))
    assert detect_feature_path("usb_charge", **roots) == os.path.join(roots["acpi_dir"], "usb_charge")


def test_resolve_paths_keeps_fixed_paths_and_probes_variable_ones(roots):
    config = {"paths": dict(DEFAULT_CONFIG["paths"]), "probe": roots}
    paths = resolve_paths(config)

    assert isinstance(paths, FeaturePaths)
    assert paths.power == "/sys/class/power_supply/BAT1/charge_control_end_threshold"
    assert paths.usb_charge == os.path.join(roots["acpi_dir"], "usb_charge")
    assert paths.allow_recording == os.path.join(roots["acpi_dir"], "allow_recording")


def test_resolve_paths_explicit_override_skips_probing(roots, tmp_path):
    override = str(tmp_path / "my_usb_charge")
    config = {
        "paths": dict(DEFAULT_CONFIG["paths"], usb_charge=override),
        "probe": dict(roots, unknown_key="ignored"),
    }
    assert resolve_paths(config).usb_charge == override


def test_feature_paths_are_immutable(roots):
    paths = resolve_paths({"paths": dict(DEFAULT_CONFIG["paths"]), "probe": roots})
    with pytest.raises(AttributeError):
        paths.power = "/tmp/elsewhere"
