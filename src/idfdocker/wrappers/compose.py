from .common import *
from .. import defaults


class ComposeRunWrapper(BaseWrapper):
    """``docker compose run`` of one program inside the toolchain service."""
    program: str = Field()
    args: list[str] = Field(default=[])
    service: str = Field(default=defaults.COMPOSE_SERVICE)
    container_cli: str = Field(default=defaults.CONTAINER_CLI)
    compose_file: str | None = Field(default=None)
    remove: bool = Field(default=defaults.COMPOSE_REMOVE_CONTAINER)

    def get_cmd(self):
        cmd = [self.container_cli, "compose"]

        if self.compose_file:
            cmd.append("-f")
            cmd.append(self.compose_file)

        cmd.append("run")

        if self.remove:
            cmd.append("--rm")

        cmd.append(self.service)
        cmd.append(self.program)
        cmd.extend(self.args)

        return cmd


class DockerVersionWrapper(BaseWrapper):
    container_cli: str = Field(default=defaults.CONTAINER_CLI)
    format: str | None = Field(default=None)

    def get_cmd(self):
        cmd = [self.container_cli, "version"]

        if self.format:
            cmd.append("--format")
            cmd.append(self.format)

        return cmd


class DockerContextWrapper(BaseWrapper):
    container_cli: str = Field(default=defaults.CONTAINER_CLI)

    def get_cmd(self):
        return [self.container_cli, "context", "show"]
