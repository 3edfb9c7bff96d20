from .commands import ARGUMENT_PROMPTS, COMMANDS, Command
from .utils.envcheck import check_environment
from .utils.loggerutils import warn


def dispatch(name, argument, ctx) -> int:
    """Run one command and return its exit status.

    Unknown names print the help text. Every command but help needs a
    reachable Docker server, nothing runs without one.
    """
    command = Command.parse(name)
    if command is None:
        warn(f"Unknown command: {name}")
        COMMANDS[Command.HELP]().run(None, ctx)
        return 1

    if argument is None and command in ARGUMENT_PROMPTS:
        # empty answers are passed on, idf.py validates names and targets
        argument = ctx.prompt(ARGUMENT_PROMPTS[command])

    if command is not Command.HELP:
        if not check_environment(ctx.settings, ctx.runner, verbose=ctx.verbose):
            return 1

    cmd_instance = COMMANDS[command]()
    return cmd_instance.run(argument, ctx)
