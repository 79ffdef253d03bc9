"""
commands.py - Un comando por cada función del portátil.

Cada comando recibe los argumentos a partir del verbo (args[0] es el verbo),
valida subcomando y valor, y lee o escribe su nodo sysfs. Los errores se
lanzan como SamsungCliError y los trata el despachador.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from samsung_cli.model.errors import (
    FileOpenError,
    MissingArgumentError,
    MissingSubcommandError,
    UnknownSubcommandError,
)
from samsung_cli.model.paths import FeaturePaths
from samsung_cli.model.sysfs import read_line, write_value
from samsung_cli.model.system_data import get_battery_info
from samsung_cli.model.values import check_mode, parse_range, parse_toggle
from samsung_cli.view.formatting import format_battery, format_help, format_toggle


class Command:
    """
    Clase base de los comandos.

    Las subclases definen SUBCOMMANDS e implementan un método por subcomando
    (read, set, list). ``describe`` devuelve la línea de lectura y la reutiliza
    el comando status.
    """

    name = ""
    label = ""  # nombre usado en los mensajes de error
    title = ""  # nombre usado por status cuando el nodo no se puede leer
    value_name = "value"
    help_text = ""
    SUBCOMMANDS: Sequence[str] = ("read", "set")

    def __init__(self, paths: FeaturePaths):
        self.paths = paths

    def execute(self, args: Sequence[str]) -> bool:
        if len(args) < 2:
            raise MissingSubcommandError(
                f"Missing {self.label} subcommand. Use {self._subcommand_hint()}."
            )
        subcommand = args[1]
        if subcommand not in self.SUBCOMMANDS:
            raise UnknownSubcommandError(self.label, subcommand)
        if subcommand == "set":
            if len(args) < 3:
                raise MissingArgumentError(f"Missing {self.value_name} for '{self.name} set'")
            return self.set(args[2])
        return getattr(self, subcommand)()

    def read(self) -> bool:
        print(self.describe())
        return True

    def describe(self) -> str:
        raise NotImplementedError

    def set(self, value: str) -> bool:
        raise NotImplementedError

    def _subcommand_hint(self) -> str:
        quoted = [f"'{sub}'" for sub in self.SUBCOMMANDS]
        if len(quoted) == 1:
            return quoted[0]
        if len(quoted) == 2:
            return " or ".join(quoted)
        return ", ".join(quoted[:-1]) + ", or " + quoted[-1]


class PowerCommand(Command):
    name = "power"
    label = "power"
    title = "Charge threshold"
    help_text = (
        "  power read    Read the charge threshold\n"
        "  power set <value>  Set the charge threshold (0-100)"
    )

    def describe(self) -> str:
        return f"Current charge threshold: {read_line(self.paths.power)}%"

    def set(self, value: str) -> bool:
        threshold = parse_range(value, 0, 100)
        write_value(self.paths.power, str(threshold))
        print(f"Set charge threshold to {threshold}%")
        return True


class FanCommand(Command):
    name = "fan"
    label = "fan"
    title = "Fan speed"
    help_text = "  fan read      Read current fan speed in RPM"
    SUBCOMMANDS = ("read",)

    def describe(self) -> str:
        return f"Current fan speed: {read_line(self.paths.fan)} RPM"


class PerformanceCommand(Command):
    name = "perf"
    label = "performance"
    title = "Performance mode"
    value_name = "mode"
    help_text = (
        "  perf read     Read current performance mode\n"
        "  perf set <mode>  Set performance mode (low-power/balanced/performance)\n"
        "  perf list     List available performance modes"
    )
    SUBCOMMANDS = ("read", "set", "list")

    def describe(self) -> str:
        return f"Current performance mode: {read_line(self.paths.platform_profile)}"

    def set(self, value: str) -> bool:
        choices = read_line(self.paths.platform_profile_choices)
        mode = check_mode(value, choices)
        write_value(self.paths.platform_profile, mode)
        print(f"Set performance mode to {mode}")
        return True

    def list(self) -> bool:
        choices = read_line(self.paths.platform_profile_choices)
        print(f"Available performance modes: {choices}")
        return True


class KeyboardCommand(Command):
    name = "kbd"
    label = "keyboard"
    title = "Keyboard backlight level"
    # El nivel también lo cambian el sensor de luz ambiente y el control
    # automático de GNOME tras un tiempo inactivo.
    help_text = (
        "  kbd read      Read keyboard backlight level\n"
        "  kbd set <0-3> Set keyboard backlight level (0=off, 1-3=brightness)\n"
        "               Note: Backlight may be affected by ambient light sensor\n"
        "               and GNOME's automatic backlight control"
    )

    def describe(self) -> str:
        return f"Keyboard backlight level: {read_line(self.paths.kbd_backlight)}"

    def set(self, value: str) -> bool:
        level = parse_range(value, 0, 3)
        write_value(self.paths.kbd_backlight, str(level))
        print(f"Set keyboard backlight level to {level}")
        return True


class ToggleCommand(Command):
    """Comando sobre un nodo booleano que vale "0" o "1"."""

    path_attr = ""
    setting = ""  # texto tras "Set ... to"

    @property
    def path(self) -> str:
        return getattr(self.paths, self.path_attr)

    def describe(self) -> str:
        return f"{self.title}: {format_toggle(read_line(self.path))}"

    def set(self, value: str) -> bool:
        normalized = parse_toggle(value)
        write_value(self.path, normalized)
        print(f"Set {self.setting} to {format_toggle(normalized)}")
        return True


class RecordingCommand(ToggleCommand):
    name = "record"
    label = "recording"
    title = "Recording permission"
    setting = "recording permission"
    path_attr = "allow_recording"
    help_text = (
        "  record read   Read recording permission status\n"
        "  record set <value>  Set recording permission (0/1, on/off, true/false, yes/no)"
    )


class StartOnLidOpenCommand(ToggleCommand):
    name = "start-on-lid-open"
    label = "start-on-lid-open"
    title = "Start on lid open"
    setting = "start on lid open"
    path_attr = "start_on_lid_open"
    help_text = (
        "  start-on-lid-open read   Read start on lid open status\n"
        "  start-on-lid-open set <value>  Set start on lid open (0/1, on/off, true/false, yes/no)"
    )


class UsbChargeCommand(ToggleCommand):
    name = "usb-charge"
    label = "usb-charge"
    title = "USB charge"
    setting = "USB charge"
    path_attr = "usb_charge"
    help_text = (
        "  usb-charge read   Read USB charge status\n"
        "  usb-charge set <value>  Set USB charge (0/1, on/off, true/false, yes/no)"
    )


class StatusCommand:
    """Resumen de sólo lectura de todas las funciones y la batería."""

    name = "status"
    help_text = "  status        Show every feature and the battery state"

    def __init__(self, commands: Dict[str, Command]):
        self.commands = commands

    def execute(self, args: Sequence[str]) -> bool:
        for line in self.lines():
            print(line)
        return True

    def lines(self) -> List[str]:
        lines = []
        for command in self.commands.values():
            try:
                lines.append(command.describe())
            except FileOpenError:
                lines.append(f"{command.title}: unavailable")
        lines.append(format_battery(get_battery_info()))
        return lines


class HelpCommand:
    name = "help"
    help_text = "  help          Show this help message"

    def __init__(self, commands: Dict[str, object]):
        # Referencia al registro completo, incluido este comando
        self.commands = commands

    def execute(self, args: Sequence[str]) -> bool:
        print(self.render())
        return True

    def render(self) -> str:
        return format_help(self.commands[name].help_text for name in sorted(self.commands))


FEATURE_COMMANDS = (
    PowerCommand,
    FanCommand,
    PerformanceCommand,
    RecordingCommand,
    KeyboardCommand,
    StartOnLidOpenCommand,
    UsbChargeCommand,
)
