"""
paths.py - Resolución de rutas sysfs.

Las rutas de allow_recording, start_on_lid_open y usb_charge cambian según la
versión del driver samsung-galaxybook, así que se prueban en orden:
nodo udev, directorio del driver de plataforma y, por último, la ruta ACPI.
El resto de rutas son fijas (configurables).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict

log = logging.getLogger(__name__)

VARIABLE_FEATURES = ("allow_recording", "start_on_lid_open", "usb_charge")
PROBE_KEYS = ("udev_dir", "driver_dir", "driver_prefix", "acpi_dir")


@dataclass(frozen=True)
class FeaturePaths:
    """Tabla inmutable de rutas efectivas, fijada al arrancar el proceso."""

    power: str
    fan: str
    platform_profile: str
    platform_profile_choices: str
    kbd_backlight: str
    allow_recording: str
    start_on_lid_open: str
    usb_charge: str


def detect_feature_path(
    feature_name: str,
    udev_dir: str = "/dev/samsung-galaxybook",
    driver_dir: str = "/sys/bus/platform/drivers/samsung-galaxybook",
    driver_prefix: str = "SAM",
    acpi_dir: str = "/sys/bus/acpi/devices/SCAI:00",
) -> str:
    """
    Devuelve la primera ruta legible para ``feature_name``.

    Nunca falla: si nada es legible devuelve la ruta ACPI y la comprobación
    de existencia/permisos queda para el momento de uso.
    """
    udev_path = os.path.join(udev_dir, feature_name)
    if os.access(udev_path, os.R_OK):
        log.debug("%s: using udev node %s", feature_name, udev_path)
        return udev_path

    try:
        entries = sorted(os.listdir(driver_dir))
    except OSError:
        entries = []
    for entry in entries:
        if not entry.startswith(driver_prefix):
            continue
        path = os.path.join(driver_dir, entry, feature_name)
        if os.access(path, os.R_OK):
            log.debug("%s: using platform driver node %s", feature_name, path)
            return path

    fallback = os.path.join(acpi_dir, feature_name)
    log.debug("%s: falling back to %s", feature_name, fallback)
    return fallback


def resolve_paths(config: Dict[str, Any]) -> FeaturePaths:
    """Construye la tabla de rutas a partir de la configuración cargada."""
    paths = dict(config.get("paths", {}))
    probe = {key: value for key, value in config.get("probe", {}).items() if key in PROBE_KEYS}
    for feature in VARIABLE_FEATURES:
        if not paths.get(feature):
            paths[feature] = detect_feature_path(feature, **probe)
    return FeaturePaths(**{name: paths[name] for name in FeaturePaths.__dataclass_fields__})
