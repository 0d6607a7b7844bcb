"""
ipwho.is geolocation client.

Performs a single HTTPS lookup for a public IP address and maps the JSON
response onto GeoInfo. No API key required.
"""

import logging
import requests
from typing import Any, Dict, Optional
from . import __version__
from .config import config
from .debug import debug_lookup_method
from .errors import GeoDecodeError, GeoNoDataError, GeoTransportError
from .models import GeoInfo

logger = logging.getLogger(__name__)

GEO_ENDPOINT = "https://ipwho.is"


class GeolocationClient:
    """Client for the ipwho.is geolocation service."""

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize the client.

        Args:
            timeout: Request timeout in seconds, defaults to the configured value
        """
        self.name = "ipwho.is"
        self.base_url = GEO_ENDPOINT
        self.timeout = timeout if timeout is not None else config.get_request_timeout()

    @debug_lookup_method
    def lookup(self, ip_address: str) -> GeoInfo:
        """
        Get geolocation data for an IP address.

        Args:
            ip_address: Textual IP address, embedded in the URL as given

        Returns:
            GeoInfo built from the response

        Raises:
            GeoTransportError: Connection failure, timeout or HTTP error status
            GeoDecodeError: Body is not a JSON object or a field has the wrong type
            GeoNoDataError: Response has an empty 'ip' field
        """
        url = f"{self.base_url}/{ip_address}"
        headers = {
            'User-Agent': f'netkit/{__version__}',
            'Accept': 'application/json',
        }

        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise GeoTransportError(ip_address, f"request to {self.name} failed: {e}") from e

        try:
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.HTTPError as e:
            raise GeoTransportError(ip_address, f"{self.name} returned HTTP {response.status_code}") from e
        except ValueError as e:
            raise GeoDecodeError(ip_address, f"invalid JSON from {self.name}: {e}") from e
        finally:
            response.close()

        geo = self._parse_response(ip_address, data)
        logger.debug(f"Geolocation for {ip_address}: {geo.country or 'unknown country'}")
        return geo

    def _parse_response(self, ip_address: str, data: Any) -> GeoInfo:
        """
        Map an ipwho.is response body onto GeoInfo.

        Unknown fields are ignored and missing or null ones become empty
        strings. A known field of the wrong JSON type is a decode failure.
        """
        if not isinstance(data, dict):
            raise GeoDecodeError(ip_address, f"expected a JSON object from {self.name}, got {type(data).__name__}")

        connection = data.get('connection')
        if connection is None:
            connection = {}
        elif not isinstance(connection, dict):
            raise GeoDecodeError(ip_address, f"expected 'connection' to be an object, got {type(connection).__name__}")

        geo = GeoInfo(
            ip=_text(ip_address, data, 'ip'),
            continent=_text(ip_address, data, 'continent'),
            country=_text(ip_address, data, 'country'),
            region=_text(ip_address, data, 'region'),
            org=_text(ip_address, connection, 'org'),
            isp=_text(ip_address, connection, 'isp'),
        )

        if not geo.ip:
            raise GeoNoDataError(ip_address)
        return geo


def _text(ip_address: str, data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise GeoDecodeError(ip_address, f"expected '{key}' to be a string, got {type(value).__name__}")
    return value
