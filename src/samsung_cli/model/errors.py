"""
errors.py - Jerarquía de errores de samsung-cli.

Cada error lleva el mensaje que se muestra al usuario tras "Error: ".
El despachador los captura en un único punto y los convierte en código de salida 1.
"""

from __future__ import annotations


class SamsungCliError(Exception):
    """Error base de la herramienta."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingSubcommandError(SamsungCliError):
    pass


class MissingArgumentError(SamsungCliError):
    pass


class UnknownCommandError(SamsungCliError):
    def __init__(self, verb: str):
        super().__init__(f"Unknown command '{verb}'")
        self.verb = verb


class UnknownSubcommandError(SamsungCliError):
    def __init__(self, feature: str, subcommand: str):
        super().__init__(f"Unknown {feature} subcommand '{subcommand}'")
        self.feature = feature
        self.subcommand = subcommand


class InvalidValueError(SamsungCliError):
    """Valor fuera de rango, no numérico, no reconocido o no disponible."""


class FileOpenError(SamsungCliError):
    """El nodo sysfs no existe o no se puede abrir."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class PermissionDeniedError(SamsungCliError):
    """Falta permiso de escritura sobre el nodo sysfs."""

    def __init__(self, path: str):
        super().__init__("Permission denied. Run with sudo.")
        self.path = path
