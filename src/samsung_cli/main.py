"""
main.py - Punto de Entrada de samsung-cli

Configura el logging, carga la configuración, resuelve una sola vez las
rutas sysfs y despacha el comando pedido.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from samsung_cli.config import load_config
from samsung_cli.controller.dispatcher import Dispatcher
from samsung_cli.model.paths import resolve_paths

log = logging.getLogger("samsung_cli")


def setup_logging(level: str = "WARNING") -> None:
    """Handler de consola (stderr) para el logger del paquete."""
    log.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        log.addHandler(handler)


def main(argv: Optional[Sequence[str]] = None, config_path: Optional[Path] = None) -> int:
    """
    Ejecuta un comando y devuelve el código de salida.

    Args:
        argv: Argumentos sin el nombre del programa (por defecto sys.argv[1:]).
        config_path: Ruta alternativa de config.json.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    config = load_config(config_path)
    setup_logging(config.get("log_level", "WARNING"))

    paths = resolve_paths(config)
    log.debug("Resolved paths: %s", paths)

    return Dispatcher(paths).dispatch(args)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
