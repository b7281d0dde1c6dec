"""
.. module:: command
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the command line entry point that wakes a networked device by
               broadcasting a magic packet.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

from typing import List, Optional

import argparse
import logging
import re
import sys

from mojo.wakeonlan.broadcast import send_magic_packet
from mojo.wakeonlan.constants import DEFAULT_BROADCAST_ADDRESS, DEFAULT_PORT
from mojo.wakeonlan.exceptions import UsageError, WakeOnLanError
from mojo.wakeonlan.interfaces import lookup_broadcast_address
from mojo.wakeonlan.magicpacket import create_magic_packet
from mojo.wakeonlan.resolution import encode_address, format_address_hex, parse_port

PROGRAM_NAME = "wol"
PROGRAM_USAGE = "%(prog)s [-h] [-q] [-v] [-b <bcast>] [-p <port>] [-i <ifname>] <dest>"

LOGGING_FORMAT = "%(levelname)s: %(message)s"

REGEX_MISSING_OPTION_ARGUMENT = re.compile(r"argument (-[A-Za-z]).*expected one argument")

logger = logging.getLogger()


class WakeArgumentParser(argparse.ArgumentParser):
    """
        Argument parser that raises a :class:`UsageError` instead of exiting the process
        so the command decides the exit status.
    """

    def error(self, message):
        mobj = REGEX_MISSING_OPTION_ARGUMENT.match(message)
        if mobj is not None:
            message = "Option {} requires an argument".format(mobj.group(1))
        raise UsageError(message)


def create_argument_parser() -> WakeArgumentParser:
    parser = WakeArgumentParser(prog=PROGRAM_NAME, usage=PROGRAM_USAGE, add_help=False,
        description="Wake a networked device by broadcasting a Wake-On-LAN magic packet.")
    parser.add_argument("-h", dest="help", action="store_true", help="Show the usage and exit.")
    parser.add_argument("-q", dest="quiet", action="store_true", help="Do not print a confirmation when the packet is sent.")
    parser.add_argument("-v", dest="verbose", action="store_true", help="Log debug messages to stderr.")
    parser.add_argument("-b", dest="broadcast", metavar="<bcast>", default=None,
        help="The broadcast address to send the packet to. (default {})".format(DEFAULT_BROADCAST_ADDRESS))
    parser.add_argument("-p", dest="port", metavar="<port>", default=None,
        help="The UDP port to send the packet to. (default {})".format(DEFAULT_PORT))
    parser.add_argument("-i", dest="ifname", metavar="<ifname>", default=None,
        help="Send to the broadcast address of this network interface.")
    parser.add_argument("dest", metavar="<dest>", nargs="*", default=[], help="The hardware address of the device to wake.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
        Runs the wake command.

        :param argv: The command line arguments without the program name, defaults to sys.argv[1:].

        :returns: The process exit status, 0 when the packet was sent and 1 on any error.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_argument_parser()

    try:
        args, extras = parser.parse_known_intermixed_args(argv)

        if args.help:
            parser.print_usage(file=sys.stderr)
            return 1

        for extra in extras:
            if extra.startswith("-"):
                raise UsageError("Unknown option '{}'".format(extra))

        logging.basicConfig(format=LOGGING_FORMAT, stream=sys.stderr,
                            level=logging.DEBUG if args.verbose else logging.WARNING)

        broadcast_addr = None
        if args.broadcast is not None:
            broadcast_addr = encode_address(args.broadcast)

        port = DEFAULT_PORT
        if args.port is not None:
            port = parse_port(args.port)

        destinations = args.dest + extras
        if len(destinations) != 1:
            parser.print_usage(file=sys.stderr)
            return 1

        if broadcast_addr is None:
            if args.ifname is not None:
                broadcast_addr = encode_address(lookup_broadcast_address(args.ifname))
            else:
                broadcast_addr = encode_address(DEFAULT_BROADCAST_ADDRESS)

        hwaddr = destinations[0]
        packet = create_magic_packet(hwaddr)
        send_magic_packet(packet, broadcast_addr, port)

        if not args.quiet:
            print("Packet sent to {}-{} on port {}".format(format_address_hex(broadcast_addr), hwaddr, port))

    except WakeOnLanError as wol_err:
        logger.debug("The wake command failed.", exc_info=True)
        print(str(wol_err), file=sys.stderr)
        return 1

    return 0
