"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for finding the broadcast addresses of network interfaces

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

from typing import Union

import logging

import netifaces

from mojo.wakeonlan.exceptions import InterfaceError

logger = logging.getLogger()


def get_ipv4_broadcast_address(ifname: str) -> Union[str, None]:
    """
        Get the first IPv4 broadcast address associated with the specified interface name.

        :param ifname: The interface name to lookup the broadcast address for.

        :returns: The IPv4 broadcast address associated with the specified interface name or None

        :raises InterfaceError: When there is no interface with the specified name.
    """
    baddr = None

    if ifname not in netifaces.interfaces():
        raise InterfaceError("Unknown network interface '{}'".format(ifname), ifname)

    # An interface can have more than one address within the AF_INET family or
    # none at all, and not every address carries a broadcast address.
    address_info = netifaces.ifaddresses(ifname)
    if address_info is not None and netifaces.AF_INET in address_info:
        for addr_info in address_info[netifaces.AF_INET]:
            if "broadcast" in addr_info:
                baddr = addr_info["broadcast"]
                break

    return baddr


def lookup_broadcast_address(ifname: str) -> str:
    """
        Looks up the IPv4 broadcast address for an interface and fails if it has none.

        :param ifname: The interface name to lookup the broadcast address for.

        :returns: The IPv4 broadcast address of the interface.

        :raises InterfaceError: When the interface is unknown or has no IPv4 broadcast address.
    """
    baddr = get_ipv4_broadcast_address(ifname)
    if baddr is None:
        errmsg = "Network interface '{}' has no IPv4 broadcast address".format(ifname)
        raise InterfaceError(errmsg, ifname)

    logger.debug("Using broadcast address %s of interface %s", baddr, ifname)

    return baddr
