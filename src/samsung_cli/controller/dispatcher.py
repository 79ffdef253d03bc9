"""
dispatcher.py - Despacho de verbos a comandos.

Registra un comando por verbo y traduce el resultado (o el error) a un
código de salida: 0 éxito, 1 cualquier error.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, Sequence

from samsung_cli.controller.commands import FEATURE_COMMANDS, HelpCommand, StatusCommand
from samsung_cli.model.errors import SamsungCliError, UnknownCommandError
from samsung_cli.model.paths import FeaturePaths

log = logging.getLogger(__name__)


class Dispatcher:
    """
    Mapea el primer argumento de la línea de comandos a su comando.
    """

    def __init__(self, paths: FeaturePaths):
        self.paths = paths
        self.commands: Dict[str, object] = {}
        features = {cls.name: cls(paths) for cls in FEATURE_COMMANDS}
        self.commands.update(features)
        self.commands["status"] = StatusCommand(features)
        # help al final: necesita el registro completo
        self.commands["help"] = HelpCommand(self.commands)

    def dispatch(self, args: Sequence[str]) -> int:
        """
        Ejecuta ``args`` (sin el nombre del programa) y devuelve el código de salida.
        """
        if not args:
            self.commands["help"].execute([])
            return 1

        verb = args[0]
        command = self.commands.get(verb)
        try:
            if command is None:
                raise UnknownCommandError(verb)
            log.debug("Dispatching '%s' with %s", verb, list(args[1:]))
            return 0 if command.execute(list(args)) else 1
        except UnknownCommandError as exc:
            print(f"Error: {exc.message}", file=sys.stderr)
            self.commands["help"].execute([])
            return 1
        except SamsungCliError as exc:
            print(f"Error: {exc.message}", file=sys.stderr)
            return 1
