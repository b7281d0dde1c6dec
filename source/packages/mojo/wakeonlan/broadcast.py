"""
.. module:: broadcast
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains broadcast helper functions.

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
import socket

from mojo.wakeonlan.constants import DEFAULT_PORT, MAGIC_PACKET_LENGTH, MAX_PORT
from mojo.wakeonlan.exceptions import TransmissionError
from mojo.wakeonlan.magicpacket import create_magic_packet
from mojo.wakeonlan.resolution import decode_address, encode_address

logger = logging.getLogger()


def send_magic_packet(packet: bytes, broadcast_addr: bytes, port: int):
    """
        Sends a magic packet as a single UDP broadcast datagram.  The socket only lives
        for the duration of the call and is closed on every exit path.

        :param packet: The magic packet payload to send.
        :param broadcast_addr: The packed IPv4 broadcast address in network byte order.
        :param port: The UDP port to send the packet to.

        :raises TransmissionError: When the socket cannot be opened, the broadcast option
                                   cannot be set, the packet cannot be sent or the destination
                                   address or port is not valid.
    """
    if len(packet) != MAGIC_PACKET_LENGTH:
        raise ValueError("The magic packet must be {} bytes long. len={}".format(MAGIC_PACKET_LENGTH, len(packet)))

    try:
        destination = (decode_address(broadcast_addr), port)
    except ValueError as verr:
        raise TransmissionError("Invalid broadcast address {!r}".format(broadcast_addr), broadcast_addr) from verr

    if not isinstance(port, int) or port < 0 or port > MAX_PORT:
        raise TransmissionError("Invalid destination port {!r}".format(port), destination)

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
    except OSError as os_err:
        raise TransmissionError("Failed to open socket", destination) from os_err

    try:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as os_err:
            raise TransmissionError("Failed to set socket options", destination) from os_err

        logger.debug("Sending %d byte magic packet to %s:%d", len(packet), destination[0], destination[1])

        try:
            sock.sendto(packet, destination)
        except (OSError, OverflowError) as send_err:
            raise TransmissionError("Failed to send packet", destination) from send_err
    finally:
        sock.close()

    return


def broadcast_wake_on_lan_magic_message(broadcast_addr: str, mac_addr: str, port: int = DEFAULT_PORT) -> bytes:
    """
        Builds the magic packet for 'mac_addr' and broadcasts it to 'broadcast_addr'.

            [FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )

        :param broadcast_addr: The dotted IPv4 broadcast address to send the packet to.
        :param mac_addr: The hardware address of the device to wake.
        :param port: The UDP port to send the packet to.

        :returns: The magic packet that was sent.
    """
    packed_addr = encode_address(broadcast_addr)
    packet = create_magic_packet(mac_addr)

    send_magic_packet(packet, packed_addr, port)

    return packet
