import os

from ..utils.runhelper import ProcessRunner
from ..verifiers.settingsschema import SettingsSchema
from ..wrappers import InstallerWrapper


def bridge_dir(settings: SettingsSchema, cwd: str) -> str:
    return os.path.join(cwd, settings.bridge_dir)


def bridge_executable(settings: SettingsSchema, cwd: str) -> str:
    return os.path.join(bridge_dir(settings, cwd), settings.bridge_executable)


def ensure_bridge_tool(settings: SettingsSchema, runner: ProcessRunner, cwd: str) -> bool:
    """Make sure esp_rfc2217_server is installed, running the installer if needed."""
    directory = bridge_dir(settings, cwd)
    if os.path.isdir(directory):
        return True

    installer = os.path.join(cwd, settings.installer)
    if not os.path.isfile(installer):
        print(f"ERROR: Installer not found: {installer}")
        return False

    print(f"esp_rfc2217_server not found in {directory}, running {installer}")
    InstallerWrapper(script=installer).run_cmd(runner, cwd=cwd)

    if not os.path.isdir(directory):
        print("ERROR: Failed to install esp_rfc2217_server")
        return False
    return True
