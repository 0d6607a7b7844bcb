"""
Address classification.

Derives version, IPv4 class and private/public scope from a ParsedAddress.
Everything here is pure: no I/O and no failure path for valid input.
"""

import ipaddress
from .models import ClassificationResult, ParsedAddress

IPV4 = "IPv4"
IPV6 = "IPv6"
PRIVATE = "Private"
PUBLIC = "Public"

# Upper bound (exclusive) of the first octet for each class
_CLASS_BOUNDS = [
    (128, "Class A"),
    (192, "Class B"),
    (224, "Class C"),
    (240, "Class D (Multicast)"),
    (256, "Class E (Reserved)"),
]

_PRIVATE_NETWORKS = [
    ipaddress.ip_network('10.0.0.0/8'),
    ipaddress.ip_network('172.16.0.0/12'),
    ipaddress.ip_network('192.168.0.0/16'),
    ipaddress.ip_network('127.0.0.0/8'),     # Loopback
    ipaddress.ip_network('169.254.0.0/16'),  # Link-local
    ipaddress.ip_network('::1/128'),         # IPv6 loopback
    ipaddress.ip_network('fc00::/7'),        # IPv6 unique local
    ipaddress.ip_network('fe80::/10'),       # IPv6 link-local
]


def ipv4_class(first_octet: int) -> str:
    """
    Classful network label for an IPv4 address.

    Args:
        first_octet: First octet of the address, 0-255

    Returns:
        One of 'Class A', 'Class B', 'Class C', 'Class D (Multicast)'
        or 'Class E (Reserved)'
    """
    if not 0 <= first_octet <= 255:
        raise ValueError(f"Octet out of range: {first_octet}")

    for upper, label in _CLASS_BOUNDS:
        if first_octet < upper:
            return label


def is_private(parsed: ParsedAddress) -> bool:
    """
    Check if an address is in private address space.

    Covers RFC 1918, loopback, link-local and the IPv6 unique local
    range. IPv4-mapped IPv6 addresses are checked on their IPv4 form.
    """
    address = parsed.ipv4 or parsed.address
    return any(address in network for network in _PRIVATE_NETWORKS)


def classify(parsed: ParsedAddress) -> ClassificationResult:
    """Derive version, class and scope for a parsed address."""
    scope = PRIVATE if is_private(parsed) else PUBLIC

    if parsed.is_ipv4:
        return ClassificationResult(version=IPV4, scope=scope, ip_class=ipv4_class(parsed.first_octet))
    return ClassificationResult(version=IPV6, scope=scope)
