
import unittest

from mojo.wakeonlan.exceptions import ParseError
from mojo.wakeonlan.resolution import parse_port

class TestPortHelpersPositive(unittest.TestCase):

    def test_parse_port_default(self):
        port = parse_port("60000")
        assert port == 60000, f"Unexpected port value. port={port}"
        return

    def test_parse_port_zero(self):
        port = parse_port("0")
        assert port == 0, f"Unexpected port value. port={port}"
        return

    def test_parse_port_hex(self):
        port = parse_port("0x9")
        assert port == 9, f"Unexpected port value. port={port}"
        return

    def test_parse_port_leading_zeros(self):
        port = parse_port("0009")
        assert port == 9, f"Unexpected port value. port={port}"
        return

    def test_parse_port_leading_zero_is_decimal(self):
        port = parse_port("010")
        assert port == 10, f"Unexpected port value. port={port}"
        return

    def test_parse_port_octal_prefix(self):
        port = parse_port("0o17")
        assert port == 15, f"Unexpected port value. port={port}"
        return

    def test_parse_port_max(self):
        port = parse_port("65535")
        assert port == 65535, f"Unexpected port value. port={port}"
        return


class TestPortHelpersNegative(unittest.TestCase):

    def test_parse_port_word(self):
        with self.assertRaises(ParseError) as ctx:
            parse_port("abc")
        assert str(ctx.exception) == "Option -p requires integer as argument."
        assert ctx.exception.candidate == "abc"
        return

    def test_parse_port_trailing_garbage(self):
        with self.assertRaises(ParseError):
            parse_port("12abc")
        return

    def test_parse_port_empty(self):
        with self.assertRaises(ParseError):
            parse_port("")
        return

    def test_parse_port_too_large(self):
        with self.assertRaises(ParseError):
            parse_port("70000")
        return

    def test_parse_port_negative(self):
        with self.assertRaises(ParseError):
            parse_port("-1")
        return

    def test_parse_port_digit_separator(self):
        with self.assertRaises(ParseError):
            parse_port("6_0000")
        return

    def test_parse_port_whitespace(self):
        with self.assertRaises(ParseError):
            parse_port(" 9")
        with self.assertRaises(ParseError):
            parse_port("9\n")
        return


if __name__ == '__main__':
    unittest.main()
