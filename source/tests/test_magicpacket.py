
import unittest

from mojo.wakeonlan.constants import MAGIC_PACKET_LENGTH
from mojo.wakeonlan.exceptions import ParseError
from mojo.wakeonlan.magicpacket import build_magic_packet, create_magic_packet

class TestMagicPacket(unittest.TestCase):

    def test_build_packet_layout(self):
        hwaddr = bytes([0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF])
        packet = build_magic_packet(hwaddr)

        assert len(packet) == 102, f"The magic packet should be 102 bytes. len={len(packet)}"
        assert len(packet) == MAGIC_PACKET_LENGTH
        assert packet[:6] == b"\xff" * 6, f"Unexpected sync prefix. prefix={packet[:6]!r}"
        for k in range(16):
            offset = 6 + (6 * k)
            assert packet[offset:offset + 6] == hwaddr, f"Repetition {k} does not match the hardware address."
        return

    def test_build_packet_all_ones_address(self):
        packet = build_magic_packet(b"\xff" * 6)
        assert packet == b"\xff" * 102
        return

    def test_build_packet_is_deterministic(self):
        hwaddr = bytes([1, 2, 3, 4, 5, 6])
        assert build_magic_packet(hwaddr) == build_magic_packet(hwaddr)
        return

    def test_build_packet_wrong_length(self):
        with self.assertRaises(ValueError):
            build_magic_packet(b"\x01\x02\x03")
        return

    def test_create_packet_from_string(self):
        packet = create_magic_packet("01:02:03:04:05:06")
        expected = bytes.fromhex("FFFFFFFFFFFF" + "010203040506" * 16)
        assert packet == expected, f"Unexpected packet. packet={packet.hex()}"
        return

    def test_create_packet_bad_address(self):
        with self.assertRaises(ParseError):
            create_magic_packet("AA:BB:CC")
        return


if __name__ == '__main__':
    unittest.main()
