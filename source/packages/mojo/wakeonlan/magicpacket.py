"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains the functions for building Wake-On-LAN magic packets.

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

from mojo.wakeonlan.constants import (
    HWADDR_LENGTH,
    MAGIC_REPEAT_COUNT,
    MAGIC_SYNC_BYTE,
    MAGIC_SYNC_LENGTH
)
from mojo.wakeonlan.hwaddress import parse_hardware_address


def build_magic_packet(hwaddr: bytes) -> bytes:
    """
        Builds the magic packet for the hardware address provided.

            [FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )

        :param hwaddr: The 6 raw bytes of the hardware address of the device to wake.

        :returns: The magic packet payload.
    """
    if len(hwaddr) != HWADDR_LENGTH:
        raise ValueError("The hardware address must be {} bytes long. hwaddr={!r}".format(HWADDR_LENGTH, hwaddr))

    packet = bytes([MAGIC_SYNC_BYTE] * MAGIC_SYNC_LENGTH) + bytes(hwaddr) * MAGIC_REPEAT_COUNT

    return packet


def create_magic_packet(hwaddr: str) -> bytes:
    """
        Parses the hardware address string and builds the magic packet for it.
    """
    return build_magic_packet(parse_hardware_address(hwaddr))
