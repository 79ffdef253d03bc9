"""
view - Salida por consola

Formatea lecturas y la ayuda; no toca sysfs.
"""

from .formatting import format_battery, format_help, format_toggle

__all__ = ['format_battery', 'format_help', 'format_toggle']
