"""
.. module:: resolution
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for resolving broadcast addresses and ports.

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

import socket

from mojo.wakeonlan.constants import MAX_PORT, REGEX_IPV4_COMPONENTS, REGEX_PORT_LITERAL
from mojo.wakeonlan.exceptions import ParseError


def is_ipv4_address(candidate: str) -> bool:
    """
        Checks to see if 'candidate' is an ipv4 address.

        :param candidate: A string that is to be checked to see if it is a valid IPv4 address.

        :returns: A boolean indicating if an IP address is an IPv4 address
    """
    is_ipv4 = False

    # The regex will ensure that all the component characters are integer characters
    # and that we have the correct number of components.
    mobj = REGEX_IPV4_COMPONENTS.match(candidate)
    if mobj is not None:
        addr_components = [ v for v in mobj.groups() ]
        if len(addr_components) == 4:
            is_ipv4 = True
            for nc in addr_components:
                cval = int(nc)
                if cval < 0 or cval > 255:
                    is_ipv4 = False
                    break

    return is_ipv4


def encode_address(address: str) -> bytes:
    """
        Encodes the dotted IPv4 address string to bytes in network byte order.

        :param address: The IP address to encode.

        :returns: A packed string suitable for use with low-level network functions.

        :raises ParseError: When the address is not a dotted IPv4 address.
    """
    if not is_ipv4_address(address):
        raise ParseError("Option -b requires address as argument", address)

    try:
        packed = socket.inet_pton(socket.AF_INET, address)
    except OSError as os_err:
        raise ParseError("Option -b requires address as argument", address) from os_err

    return packed


def decode_address(packed: bytes) -> str:
    """
        Decodes a packed IPv4 address back to its dotted string form.
    """
    return socket.inet_ntop(socket.AF_INET, packed)


def format_address_hex(packed: bytes) -> str:
    """
        Formats a packed IPv4 address as a 32 bit uppercase hex number, 'C0A801FF' for
        192.168.1.255.
    """
    return "{:X}".format(int.from_bytes(packed, byteorder="big"))


def parse_port(candidate: str) -> int:
    """
        Parses a port option value.  Plain digits are read as a decimal number, even with
        leading zeros, and literals with an '0x', '0o' or '0b' prefix are read in that base.
        Trailing characters, whitespace and '_' separators are not accepted.

        :param candidate: The port string to parse.

        :returns: The port number.

        :raises ParseError: When the value is not an integer literal or is outside of the port range.
    """
    if REGEX_PORT_LITERAL.match(candidate) is None:
        raise ParseError("Option -p requires integer as argument.", candidate)

    if candidate.isdigit():
        port = int(candidate, 10)
    else:
        port = int(candidate, 0)

    if port < 0 or port > MAX_PORT:
        errmsg = "Option -p requires a port between 0 and {}. port={}".format(MAX_PORT, port)
        raise ParseError(errmsg, candidate)

    return port
