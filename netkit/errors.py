"""
Exception hierarchy for netkit.

InvalidAddressError ends the command with a user-facing message.
GeoLookupError and its subclasses describe a failed geolocation lookup;
callers treat them as "no geo info" rather than as a fault.
"""


class NetkitError(Exception):
    """Base class for all netkit errors."""


class InvalidAddressError(NetkitError, ValueError):
    """Raised when input text is not a valid IPv4 or IPv6 address."""

    user_message = "Invalid IP address."

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid IP address: {text!r}")


class GeoLookupError(NetkitError):
    """Raised when the geolocation service gives no usable answer."""

    def __init__(self, ip_address: str, message: str):
        self.ip_address = ip_address
        super().__init__(message)


class GeoTransportError(GeoLookupError):
    """Connection failure, timeout or non-success HTTP status."""


class GeoDecodeError(GeoLookupError):
    """Response body is not a JSON object."""


class GeoNoDataError(GeoLookupError):
    """Service answered but has no data for the address."""

    def __init__(self, ip_address: str):
        super().__init__(ip_address, f"no data for IP {ip_address}")
