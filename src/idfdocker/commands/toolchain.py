from . import Command, register


@register(Command.SET_TARGET)
class SetTargetCommand:
    def run(self, chip, ctx):
        return ctx.toolchain("set-target", chip).returncode


@register(Command.MENUCONFIG)
class MenuconfigCommand:
    def run(self, argument, ctx):
        return ctx.toolchain("menuconfig").returncode


@register(Command.BUILD)
class BuildCommand:
    def run(self, argument, ctx):
        return ctx.toolchain("build").returncode


@register(Command.BASH)
class BashCommand:
    def run(self, argument, ctx):
        return ctx.compose_run(ctx.settings.shell, []).returncode
