"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants that are used when building and sending
               Wake-On-LAN magic packets.

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

import re

DEFAULT_BROADCAST_ADDRESS = "255.255.255.255"
DEFAULT_PORT = 60000

MAX_PORT = 65535

HWADDR_LENGTH = 6
HWADDR_SEPARATOR = ":"

# [FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )
MAGIC_SYNC_BYTE = 0xFF
MAGIC_SYNC_LENGTH = 6
MAGIC_REPEAT_COUNT = 16
MAGIC_PACKET_LENGTH = MAGIC_SYNC_LENGTH + (HWADDR_LENGTH * MAGIC_REPEAT_COUNT)

CHARSET_HEX_DIGITS = "0123456789abcdefABCDEF"

REGEX_IPV4_COMPONENTS = re.compile(r"^(0|[1-9][0-9]{0,2})\.(0|[1-9][0-9]{0,2})\.(0|[1-9][0-9]{0,2})\.(0|[1-9][0-9]{0,2})\Z")

# Decimal, or an 0x, 0o or 0b prefixed literal, with no '_' separators or whitespace
REGEX_PORT_LITERAL = re.compile(r"^(?:[0-9]+|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+)\Z")
