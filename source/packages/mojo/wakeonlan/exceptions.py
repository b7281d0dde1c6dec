"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised while parsing wake targets and
               broadcasting magic packets.

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


class WakeOnLanError(RuntimeError):
    """
        This error is the base error for all the errors raised while waking a device.
    """

class UsageError(WakeOnLanError):
    """
        This error is raised when the command line is used incorrectly, such as an unknown
        option or an option that is missing its argument.
    """

class ParseError(WakeOnLanError):
    """
        This error is raised when a hardware address, broadcast address or port cannot
        be parsed.
    """
    def __init__(self, message, candidate, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.candidate = candidate
        return

class TransmissionError(WakeOnLanError):
    """
        This error is raised when the magic packet could not be sent because a socket
        operation failed.
    """
    def __init__(self, message, destination, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.destination = destination
        return

class InterfaceError(WakeOnLanError):
    """
        This error is raised when a broadcast address cannot be found for a network interface.
    """
    def __init__(self, message, ifname, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.ifname = ifname
        return
