"""
system_data.py - Estado de la batería vía psutil.

Se usa sólo en el resumen del comando status.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import psutil


def get_battery_info() -> Optional[Dict[str, Any]]:
    """
    Devuelve porcentaje y estado de carga, o None si no hay batería visible.

    Returns:
        Dict con:
            - percent: Porcentaje de carga (redondeado)
            - plugged: True si está conectado a la corriente
    """
    try:
        battery = psutil.sensors_battery()
    except (AttributeError, NotImplementedError, OSError):
        return None
    if battery is None:
        return None
    return {
        "percent": int(round(battery.percent)),
        "plugged": bool(battery.power_plugged),
    }
