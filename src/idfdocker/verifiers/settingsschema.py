"""Schema definition for idf-docker settings files"""

from pydantic import BaseModel, Field

from typing import Optional

from .. import defaults


class SettingsSchema(BaseModel, extra="forbid"):
    container_cli: str = defaults.CONTAINER_CLI
    compose_file: Optional[str] = None
    service: str = defaults.COMPOSE_SERVICE
    remove_container: bool = defaults.COMPOSE_REMOVE_CONTAINER
    toolchain: str = defaults.TOOLCHAIN
    shell: str = defaults.SHELL
    rfc2217_port: int = Field(default=defaults.RFC2217_PORT, gt=0, lt=65536)
    gateway_host: str = defaults.RFC2217_GATEWAY_HOST
    bridge_dir: str = defaults.BRIDGE_DIR
    bridge_executable: str = defaults.BRIDGE_EXECUTABLE
    installer: str = defaults.BRIDGE_INSTALLER

    def rfc2217_url(self) -> str:
        return f"rfc2217://{self.gateway_host}:{self.rfc2217_port}?{defaults.RFC2217_URL_OPTIONS}"
