import importlib
import pkgutil
import sys
from enum import Enum

from .. import config


class Command(str, Enum):
    CREATE_PROJECT = "create-project"
    SET_TARGET = "set-target"
    MENUCONFIG = "menuconfig"
    BUILD = "build"
    BASH = "bash"
    ESP_RFC2217_SERVER = "esp_rfc2217_server"
    FLASH = "flash"
    MONITOR = "monitor"
    HELP = "help"

    @classmethod
    def parse(cls, name):
        """Return the matching command, None if the name is unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


# prompt text for commands that take an argument
ARGUMENT_PROMPTS = {
    Command.CREATE_PROJECT: config.PROJECT_NAME_PROMPT,
    Command.SET_TARGET: config.TARGET_PROMPT,
    Command.ESP_RFC2217_SERVER: config.SERIAL_DEVICE_PROMPT,
}

COMMANDS = {}

def register(command):
    def decorator(cls):
        COMMANDS[command] = cls
        return cls
    return decorator

def _load_all_commands():
    package = sys.modules[__name__]
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{__name__}.{module_name}")

_load_all_commands()
