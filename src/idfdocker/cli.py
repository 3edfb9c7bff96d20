""" Implementation of the command line interface.

"""

import logging
import os

from . import cliparser
from .commands import Command
from .context import DispatchContext
from .dispatcher import dispatch
from .parsers.yamlparser import parse_settings
from .utils.loggerutils import (die, logger)
from .utils.runhelper import SubprocessRunner

__all__ = "main", "run"

def main(argv=None) -> int:
    """ Execute the application CLI.

    :param argv: argument list to parse (sys.argv by default)
    :return: exit status
    """
    parser = cliparser.build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    cwd = os.getcwd()
    settings = parse_settings(args.config, cwd)
    ctx = DispatchContext(
        settings=settings,
        runner=SubprocessRunner(verbose=args.verbose),
        cwd=cwd,
        verbose=args.verbose,
    )

    if not args.command:
        # No command was specified.
        return dispatch(Command.HELP.value, None, ctx)

    return dispatch(args.command, args.argument, ctx)


def run(argv=None):
    try:
        status = main(argv)
    except KeyboardInterrupt:
        status = 130
    except Exception as err:
        # Error handler of last resort.
        logger.debug("shutting down due to fatal error", exc_info=True)
        die(str(err) or repr(err))
    raise SystemExit(status)


if __name__ == "__main__":
    run()

# vim: sw=4 et
