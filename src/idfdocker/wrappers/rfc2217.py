from .common import *
from .. import defaults


class Rfc2217ServerWrapper(BaseWrapper):
    executable: str = Field()
    device: str = Field()
    port: int = Field(default=defaults.RFC2217_PORT)
    verbose: bool = Field(default=defaults.BRIDGE_VERBOSE)

    def get_cmd(self):
        cmd = [self.executable]

        if self.verbose:
            cmd.append("-v")

        cmd.append("-p")
        cmd.append(str(self.port))
        cmd.append(self.device)

        return cmd


class InstallerWrapper(BaseWrapper):
    script: str = Field()

    def get_cmd(self):
        return [self.script]
