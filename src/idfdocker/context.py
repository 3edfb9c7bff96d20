import os
from typing import Callable

from pydantic import BaseModel, Field

from .utils.runhelper import ProcessRunner, SubprocessRunner
from .verifiers.settingsschema import SettingsSchema
from .wrappers import ComposeRunWrapper


class DispatchContext(BaseModel, arbitrary_types_allowed=True, extra="forbid"):
    """Everything a command needs from the outside world."""
    settings: SettingsSchema = Field(default_factory=SettingsSchema)
    runner: ProcessRunner = Field(default_factory=SubprocessRunner)
    prompt: Callable[[str], str] = Field(default=input)
    cwd: str = Field(default_factory=os.getcwd)
    verbose: bool = False

    def compose_run(self, program: str, args: list[str]):
        return ComposeRunWrapper(
            program=program,
            args=args,
            service=self.settings.service,
            container_cli=self.settings.container_cli,
            compose_file=self.settings.compose_file,
            remove=self.settings.remove_container,
        ).run_cmd(self.runner, cwd=self.cwd)

    def toolchain(self, *args: str):
        return self.compose_run(self.settings.toolchain, list(args))
