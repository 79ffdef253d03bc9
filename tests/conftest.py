from __future__ import annotations

import pytest

from samsung_cli.controller.dispatcher import Dispatcher
from samsung_cli.model.paths import FeaturePaths

INITIAL_VALUES = {
    "power": "100",
    "fan": "2400",
    "platform_profile": "balanced",
    "platform_profile_choices": "low-power balanced performance",
    "kbd_backlight": "1",
    "allow_recording": "1",
    "start_on_lid_open": "0",
    "usb_charge": "1",
}


@pytest.fixture
def fake_sysfs(tmp_path):
    """Árbol sysfs falso: un archivo por función con su valor inicial."""
    files = {}
    for name, value in INITIAL_VALUES.items():
        path = tmp_path / name
        path.write_text(value + "\n", encoding="utf-8")
        files[name] = str(path)
    return FeaturePaths(**files)


@pytest.fixture
def dispatcher(fake_sysfs):
    return Dispatcher(fake_sysfs)


def read(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
