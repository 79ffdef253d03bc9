"""
sysfs.py - Lectura y escritura de atributos sysfs.

Todas las lecturas devuelven la primera línea del nodo; todas las escrituras
sobrescriben el contenido completo con un valor corto.
"""

from __future__ import annotations

import logging
import os

from samsung_cli.model.errors import FileOpenError, PermissionDeniedError

log = logging.getLogger(__name__)


def read_line(path: str) -> str:
    """
    Lee la primera línea de un atributo sysfs sin el salto de línea final.

    Raises:
        FileOpenError: si la ruta no existe, no se puede abrir o no es texto UTF-8.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            value = f.readline().rstrip("\n")
    except (OSError, UnicodeDecodeError) as exc:
        log.debug("Could not read %s: %s", path, exc)
        raise FileOpenError(f"Could not open {path}", path) from exc
    log.debug("Read '%s' from %s", value, path)
    return value


def write_value(path: str, value: str) -> None:
    """
    Sobrescribe un atributo sysfs con ``value``.

    El permiso de escritura se comprueba antes de abrir para dar un mensaje claro.

    Raises:
        FileOpenError: si la ruta no existe o falla la escritura.
        PermissionDeniedError: si el proceso no puede escribir en la ruta.
    """
    if not os.path.exists(path):
        raise FileOpenError(f"Could not write to {path}", path)
    if not os.access(path, os.W_OK):
        raise PermissionDeniedError(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(value)
    except PermissionError as exc:
        raise PermissionDeniedError(path) from exc
    except OSError as exc:
        log.debug("Write to %s failed: %s", path, exc)
        raise FileOpenError(f"Could not write to {path}", path) from exc
    log.debug("Wrote '%s' to %s", value, path)
