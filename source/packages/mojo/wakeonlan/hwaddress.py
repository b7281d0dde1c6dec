"""
.. module:: hwaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for parsing and formatting ethernet hardware addresses.

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

import logging

from mojo.wakeonlan.constants import CHARSET_HEX_DIGITS, HWADDR_LENGTH, HWADDR_SEPARATOR
from mojo.wakeonlan.exceptions import ParseError

logger = logging.getLogger()


def parse_hardware_address(hwaddr: str) -> bytes:
    """
        Parses a hardware address string into the raw bytes of an ethernet address.  The
        address is read two hex digits at a time and a single ':' separator is allowed
        between any two groups, so 'AA:BB:CC:DD:EE:FF', 'aabbccddeeff' and 'AABB:CCDDEEFF'
        are all accepted.

        :param hwaddr: The hardware address string to parse.

        :returns: The 6 bytes of the hardware address.

        :raises ParseError: When a character is not a hex digit or the address is not 6 bytes long.
    """
    ether_addr = bytearray()

    index = 0
    addr_len = len(hwaddr)
    while index < addr_len:
        group = hwaddr[index:index + 2]
        if len(group) != 2 or any([ch not in CHARSET_HEX_DIGITS for ch in group]):
            errmsg = "Failed to parse hexadecimal {}".format(group)
            raise ParseError(errmsg, hwaddr)

        ether_addr.append(int(group, 16))
        index += 2

        # A separator is only valid when another group follows it
        if index < addr_len and hwaddr[index] == HWADDR_SEPARATOR:
            index += 1
            if index == addr_len:
                errmsg = "{} not a valid ether address".format(hwaddr)
                raise ParseError(errmsg, hwaddr)

    if len(ether_addr) != HWADDR_LENGTH:
        errmsg = "{} not a valid ether address".format(hwaddr)
        raise ParseError(errmsg, hwaddr)

    logger.debug("Parsed hardware address %r as %s", hwaddr, format_hardware_address(ether_addr))

    return bytes(ether_addr)


def format_hardware_address(hwaddr: bytes) -> str:
    """
        Formats the raw bytes of a hardware address as an uppercase, colon separated string.
    """
    return HWADDR_SEPARATOR.join(["{:02X}".format(b) for b in hwaddr])
