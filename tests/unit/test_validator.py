"""
Unit tests for the IP address parser.
"""

import pytest
from netkit.errors import InvalidAddressError
from netkit.validator import AddressParser


class TestAddressParser:
    """Test cases for AddressParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = AddressParser()

    def test_valid_ipv4_addresses(self):
        """Test parsing of valid IPv4 addresses."""
        valid_ipv4 = [
            "192.168.1.1",
            "8.8.8.8",
            "1.1.1.1",
            "10.0.0.1",
            "172.16.0.1",
            "255.255.255.255",
            "0.0.0.0"
        ]

        for ip in valid_ipv4:
            parsed = self.parser.parse(ip)
            assert parsed.raw == ip
            assert parsed.is_ipv4, f"{ip} should be recognized as IPv4"
            assert len(parsed.packed) == 4

    def test_valid_ipv6_addresses(self):
        """Test parsing of valid IPv6 addresses."""
        valid_ipv6 = [
            "2001:0db8:85a3:0000:0000:8a2e:0370:7334",
            "2001:db8:85a3::8a2e:370:7334",
            "::1",
            "::",
            "2001:db8::1",
            "2606:4700:4700::1111"
        ]

        for ip in valid_ipv6:
            parsed = self.parser.parse(ip)
            assert parsed.raw == ip
            assert not parsed.is_ipv4, f"{ip} should be recognized as IPv6"
            assert len(parsed.packed) == 16
            assert parsed.first_octet is None

    def test_invalid_ip_addresses(self):
        """Test rejection of invalid IP addresses."""
        invalid_ips = [
            "999.1.1.1",
            "256.256.256.256",
            "192.168.1",
            "192.168.1.1.1",
            "not-an-ip",
            "",
            "192.168.1.-1",
            "2001:0db8:85a3::8a2e::7334",
            "gggg::1",
            "fe80::1%eth0",
            " 8.8.8.8",
            "8.8.8.8\n"
        ]

        for ip in invalid_ips:
            with pytest.raises(InvalidAddressError):
                self.parser.parse(ip)

    def test_invalid_address_chains_cause(self):
        """Test that the parsing error is kept as the cause."""
        with pytest.raises(InvalidAddressError) as exc_info:
            self.parser.parse("not-an-ip")

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert exc_info.value.text == "not-an-ip"

    def test_invalid_address_is_value_error(self):
        """Test that callers catching ValueError still see invalid input."""
        with pytest.raises(ValueError):
            self.parser.parse("1.2.3")

    def test_raw_text_is_preserved(self):
        """Test that the report shows the text as typed, not a normalized form."""
        parsed = self.parser.parse("2001:0DB8::0001")
        assert parsed.raw == "2001:0DB8::0001"

    def test_ipv4_mapped_ipv6_has_ipv4_form(self):
        """Test that ::ffff:a.b.c.d maps to its IPv4 address."""
        parsed = self.parser.parse("::ffff:192.168.1.1")

        assert parsed.is_ipv4
        assert parsed.first_octet == 192
        assert len(parsed.packed) == 16

    def test_first_octet(self):
        """Test extraction of the first IPv4 octet."""
        assert self.parser.parse("0.1.2.3").first_octet == 0
        assert self.parser.parse("172.16.0.1").first_octet == 172
        assert self.parser.parse("255.255.255.255").first_octet == 255

    def test_parsed_address_is_immutable(self):
        """Test that ParsedAddress cannot be modified."""
        parsed = self.parser.parse("8.8.8.8")
        with pytest.raises(AttributeError):
            parsed.raw = "1.1.1.1"
