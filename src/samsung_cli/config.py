"""
config.py - Carga de configuración de samsung-cli.

Permite ajustar las rutas sysfs de cada función, las raíces donde se buscan
las rutas variables y el nivel de log. Si existe /etc/samsung-cli/config.json
se carga y sobrescribe los valores por defecto.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)

CONFIG_PATH = Path("/etc/samsung-cli/config.json")

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "WARNING",
    "paths": {
        "power": "/sys/class/power_supply/BAT1/charge_control_end_threshold",
        "fan": "/sys/bus/acpi/devices/PNP0C0B:00/fan_speed_rpm",
        "platform_profile": "/sys/firmware/acpi/platform_profile",
        "platform_profile_choices": "/sys/firmware/acpi/platform_profile_choices",
        "kbd_backlight": "/sys/class/leds/samsung-galaxybook::kbd_backlight/brightness",
        # Vacío = autodetección
        "allow_recording": "",
        "start_on_lid_open": "",
        "usb_charge": "",
    },
    "probe": {
        "udev_dir": "/dev/samsung-galaxybook",
        "driver_dir": "/sys/bus/platform/drivers/samsung-galaxybook",
        "driver_prefix": "SAM",
        "acpi_dir": "/sys/bus/acpi/devices/SCAI:00",
    },
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Carga config.json si existe, fusionando con defaults.

    Un archivo ausente no es un error; uno ilegible se ignora con un aviso.
    """
    path = Path(config_path) if config_path is not None else CONFIG_PATH
    config = copy.deepcopy(DEFAULT_CONFIG)

    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as f:
                user_cfg = json.load(f)
        except (OSError, ValueError) as exc:
            log.warning("Ignoring config file %s: %s", path, exc)
            return config
        if isinstance(user_cfg, dict):
            _deep_update(config, user_cfg)
            _check_types(config, path)
        else:
            log.warning("Ignoring config file %s: top level must be an object", path)

    return config


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """Actualiza recursivamente un diccionario destino con valores de otro."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


def _check_types(config: Dict[str, Any], path: Path) -> None:
    """Restaura el valor por defecto de cada clave con un tipo inválido."""
    if not isinstance(config.get("log_level"), str):
        log.warning("Ignoring log_level in %s: expected a string", path)
        config["log_level"] = DEFAULT_CONFIG["log_level"]

    for section in ("paths", "probe"):
        defaults = DEFAULT_CONFIG[section]
        values = config.get(section)
        if not isinstance(values, dict):
            log.warning("Ignoring %s in %s: expected an object", section, path)
            config[section] = copy.deepcopy(defaults)
            continue
        for key, default in defaults.items():
            if not isinstance(values.get(key), str):
                log.warning("Ignoring %s.%s in %s: expected a string", section, key, path)
                values[key] = default
