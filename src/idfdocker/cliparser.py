from argparse import ArgumentParser

from . import __version__


def build_parser():
    parser = ArgumentParser(
        'idf-docker',
        description='Run ESP-IDF in Docker and bridge a local serial port over RFC2217',
        add_help=True,
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show the commands being run')
    parser.add_argument('-c', '--config', default=None, help='Settings file (default: ./idf-docker.yaml if present)')

    # No choices here: unknown commands fall back to the help text
    parser.add_argument('command', nargs='?', default=None, help='Command to run, see "help"')
    parser.add_argument('argument', nargs='?', default=None,
                        help='Project name, target chip or serial device')

    return parser
