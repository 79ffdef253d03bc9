"""
values.py - Validación de valores antes de escribir en sysfs.

Convierte la entrada del usuario a la representación canónica que espera el
kernel, o lanza InvalidValueError sin tocar ningún archivo.
"""

from __future__ import annotations

import re

from samsung_cli.model.errors import InvalidValueError

OFF_VALUES = ("0", "off", "false", "no")
ON_VALUES = ("1", "on", "true", "yes")

_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def parse_range(value: str, low: int, high: int) -> int:
    """Entero decimal dentro de [low, high]."""
    if not _INT_RE.match(value):
        raise InvalidValueError(f"Invalid value '{value}'")
    number = int(value)
    if number < low or number > high:
        raise InvalidValueError(f"Value must be between {low} and {high}")
    return number


def parse_toggle(value: str) -> str:
    """
    Normaliza 0/1, off/on, false/true, no/yes a "0" o "1".

    Distingue mayúsculas: "On" no es válido.
    """
    if value in OFF_VALUES:
        return "0"
    if value in ON_VALUES:
        return "1"
    raise InvalidValueError("Value must be one of: 0/1, on/off, true/false, yes/no")


def check_mode(mode: str, choices: str) -> str:
    """
    Acepta ``mode`` si aparece dentro del texto de platform_profile_choices.

    La comparación es por subcadena sobre el texto crudo, no por token.
    """
    if mode not in choices:
        raise InvalidValueError(f"Invalid performance mode '{mode}'")
    return mode
