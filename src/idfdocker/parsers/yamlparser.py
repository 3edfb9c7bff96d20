import os

import yaml
import pydantic

from ..config import DEFAULT_SETTINGS_FILE
from ..utils.loggerutils import die
from ..verifiers.settingsschema import SettingsSchema


def parse_settings(filename: str | None, cwd: str) -> SettingsSchema:
    """Load the settings file, falling back to built-in defaults.

    An explicitly given file must exist. Without one, ``idf-docker.yaml``
    in the working directory is used if present.
    """
    if filename is None:
        filename = os.path.join(cwd, DEFAULT_SETTINGS_FILE)
        if not os.path.isfile(filename):
            return SettingsSchema()
    elif not os.path.isfile(filename):
        die(f'Settings file not found: {filename}')

    with open(filename, 'r') as file:
        _yml = yaml.safe_load(file)

    if _yml is None:
        _yml = {}
    if not isinstance(_yml, dict):
        die(f'Settings file {filename} must contain a mapping')

    try:
        return SettingsSchema(**_yml)
    except pydantic.ValidationError as se:
        die(f"Failed to verify settings in {filename}\n{se}")
