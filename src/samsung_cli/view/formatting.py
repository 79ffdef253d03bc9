"""
formatting.py - Texto que se muestra por consola.
"""

from __future__ import annotations

from typing import Iterable

USAGE_HEADER = (
    "Usage: samsung-cli <command> [<args>]\n"
    "CLI tool to control Samsung Galaxy Book features.\n"
    "\n"
    "Commands:"
)


def format_toggle(value: str) -> str:
    """Los nodos booleanos valen "1" cuando están activos."""
    return "Enabled" if value == "1" else "Disabled"


def format_battery(info) -> str:
    if info is None:
        return "Battery: unavailable"
    state = "charging" if info["plugged"] else "discharging"
    return f"Battery: {info['percent']}% ({state})"


def format_help(help_texts: Iterable[str]) -> str:
    lines = [USAGE_HEADER]
    lines.extend(help_texts)
    return "\n".join(lines)
