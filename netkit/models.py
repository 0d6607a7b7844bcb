"""
Value types passed between the parser, classifier, geolocation client
and reporter.
"""

import ipaddress
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True)
class ParsedAddress:
    """A validated IP address together with the text it was parsed from."""

    raw: str
    address: IPAddress = field(repr=False, compare=False)

    @property
    def packed(self) -> bytes:
        """Byte representation: 4 bytes for IPv4, 16 bytes for IPv6."""
        return self.address.packed

    @property
    def ipv4(self) -> Optional[ipaddress.IPv4Address]:
        """
        IPv4 form of the address, if it has one.

        IPv4-mapped IPv6 addresses (``::ffff:a.b.c.d``) map to their
        embedded IPv4 address.
        """
        if isinstance(self.address, ipaddress.IPv4Address):
            return self.address
        return self.address.ipv4_mapped

    @property
    def is_ipv4(self) -> bool:
        return self.ipv4 is not None

    @property
    def first_octet(self) -> Optional[int]:
        ipv4 = self.ipv4
        if ipv4 is None:
            return None
        return ipv4.packed[0]


@dataclass(frozen=True)
class ClassificationResult:
    """Version, scope and (IPv4 only) address class of an address."""

    version: str
    scope: str
    ip_class: Optional[str] = None

    @property
    def is_public(self) -> bool:
        return self.scope == "Public"


@dataclass(frozen=True)
class GeoInfo:
    """Geolocation fields as returned by the remote service."""

    ip: str = ""
    continent: str = ""
    country: str = ""
    region: str = ""
    org: str = ""
    isp: str = ""


@dataclass(frozen=True)
class Report:
    """Everything printed for one address."""

    address: ParsedAddress
    classification: ClassificationResult
    geo: Optional[GeoInfo] = None

    @property
    def ip(self) -> str:
        return self.address.raw

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary form, used for debug output."""
        return {
            'ip': self.ip,
            'version': self.classification.version,
            'class': self.classification.ip_class,
            'scope': self.classification.scope,
            'geo': asdict(self.geo) if self.geo is not None else None,
        }
