"""
Command-line entry point for netkit.

Commands are listed in an explicit table built by build_command_table()
and handed to main(); the parser is assembled from that table at startup.
"""

import os
import sys
import argparse
import logging
from typing import Callable, Dict, List, Optional
from . import __version__
from .config import config
from .errors import InvalidAddressError
from .inspector import IPInspector
from .reporter import print_report


class InfoCommand:
    """`info <ip>`: classify an address and print its report."""

    name = 'info'
    help = 'Show information about an IP address'

    def __init__(self, inspector_factory: Callable[[], IPInspector] = IPInspector):
        self.inspector_factory = inspector_factory

    def configure(self, parser: argparse.ArgumentParser):
        parser.add_argument('ip', help='IPv4 or IPv6 address to inspect')

    def run(self, args: argparse.Namespace) -> int:
        try:
            report = self.inspector_factory().inspect(args.ip)
        except InvalidAddressError:
            print(InvalidAddressError.user_message)
            return 1

        print_report(report)
        return 0


def build_command_table() -> Dict[str, object]:
    """Return the commands available on the command line, keyed by name."""
    commands = [InfoCommand()]
    return {command.name: command for command in commands}


def build_parser(commands: Dict[str, object]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='netkit',
        description='IP address information tool',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  NETKIT_REQUEST_TIMEOUT=10          - Geolocation request timeout in seconds (1-30)
  NETKIT_DEBUG=true                  - Enable debug mode with diagnostic output
  NETKIT_DEBUG_LEVEL=basic           - Debug verbosity: basic, detailed, verbose

Examples:
  netkit info 8.8.8.8
  netkit info 2001:4860:4860::8888
  netkit --debug --debug-level detailed info 1.1.1.1
"""
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode with low-level diagnostic output')
    parser.add_argument('--debug-level', choices=['basic', 'detailed', 'verbose'], default='basic',
                        help='Debug verbosity level (default: basic)')

    subparsers = parser.add_subparsers(dest='command', metavar='<command>')
    for name, command in commands.items():
        command_parser = subparsers.add_parser(name, help=command.help, description=command.help)
        command.configure(command_parser)

    return parser


def configure_logging():
    """Send library log records to stderr; DEBUG in debug mode, WARNING otherwise."""
    level = logging.DEBUG if config.is_debug_mode() else logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format='%(levelname)s %(name)s: %(message)s',
    )
    logging.getLogger('netkit').setLevel(level)


def main(argv: Optional[List[str]] = None, commands: Optional[Dict[str, object]] = None) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:]
        commands: Command table, defaults to build_command_table()

    Returns:
        Process exit status
    """
    if commands is None:
        commands = build_command_table()

    parser = build_parser(commands)
    args = parser.parse_args(argv)

    if args.debug:
        os.environ['NETKIT_DEBUG'] = 'true'
        os.environ['NETKIT_DEBUG_LEVEL'] = args.debug_level

    configure_logging()

    if not args.command:
        parser.print_help()
        return 1

    return commands[args.command].run(args)


def run():
    """Console script entry point."""
    sys.exit(main())
