from . import Command, register

USAGE = """\
Usage: idf-docker [-v] [-c CONFIG] <command> [argument]

Commands:
  create-project <name>         Create an ESP-IDF project in the current directory
  set-target <chip>             Select the target chip (esp32, esp32s3, esp32c3, ...)
  menuconfig                    Open the project configuration menu
  build                         Build the project
  bash                          Open a shell inside the ESP-IDF container
  esp_rfc2217_server <device>   Share a local serial device on port {port} (RFC2217)
  flash                         Flash the board through the RFC2217 bridge
  monitor                       Open the serial monitor through the RFC2217 bridge
  help                          Show this help

Missing arguments are asked for interactively. Run esp_rfc2217_server in a
separate terminal before flash or monitor; both connect to
{url}
"""


@register(Command.HELP)
class HelpCommand:
    def run(self, argument, ctx):
        print(usage(ctx.settings))
        return 0


def usage(settings):
    return USAGE.format(port=settings.rfc2217_port, url=settings.rfc2217_url())
