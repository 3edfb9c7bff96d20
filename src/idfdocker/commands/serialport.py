from . import Command, register


class SerialPortCommand:
    """Toolchain action talking to the board through the host's RFC2217 bridge.

    The endpoint comes from the settings only, whatever device the bridge
    was started with.
    """
    action = None

    def run(self, argument, ctx):
        return ctx.toolchain(self.action, "--port", ctx.settings.rfc2217_url()).returncode


@register(Command.FLASH)
class FlashCommand(SerialPortCommand):
    action = "flash"


@register(Command.MONITOR)
class MonitorCommand(SerialPortCommand):
    action = "monitor"
