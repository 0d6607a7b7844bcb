"""
Input validation utilities.

This module turns user-supplied text into a ParsedAddress, accepting only
the standard dotted-decimal IPv4 and colon-hex IPv6 textual forms.
"""

import ipaddress
from .errors import InvalidAddressError
from .models import ParsedAddress


class AddressParser:
    """Parser and validator for IP address text."""

    def parse(self, ip_string: str) -> ParsedAddress:
        """
        Parse text into a ParsedAddress.

        The text is used as given: surrounding whitespace, IPv6 zone
        suffixes ('fe80::1%eth0') and IPv4 octets with leading zeros are
        all rejected.

        Args:
            ip_string: String representation of an IP address

        Returns:
            ParsedAddress for the text

        Raises:
            InvalidAddressError: If the text is not a valid IP address
        """
        if not isinstance(ip_string, str) or '%' in ip_string:
            raise InvalidAddressError(ip_string)

        try:
            address = ipaddress.ip_address(ip_string)
        except ValueError as e:
            raise InvalidAddressError(ip_string) from e

        return ParsedAddress(raw=ip_string, address=address)
