from . import Command, register
from ..utils.bridgetool import bridge_executable, ensure_bridge_tool
from ..utils.loggerutils import die, note
from ..wrappers import Rfc2217ServerWrapper


@register(Command.ESP_RFC2217_SERVER)
class Rfc2217ServerCommand:
    def run(self, device, ctx):
        settings = ctx.settings
        if not ensure_bridge_tool(settings, ctx.runner, ctx.cwd):
            die(None)

        note(f"Forwarding {device} on port {settings.rfc2217_port}, flash and monitor use {settings.rfc2217_url()}")
        server = Rfc2217ServerWrapper(
            executable=bridge_executable(settings, ctx.cwd),
            device=device,
            port=settings.rfc2217_port,
        )
        return server.run_cmd(ctx.runner, cwd=ctx.cwd).returncode
