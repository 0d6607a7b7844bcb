"""
Unit tests for the IP inspection workflow.
"""

import pytest
from unittest.mock import MagicMock
from netkit.errors import (
    GeoDecodeError,
    GeoNoDataError,
    GeoTransportError,
    InvalidAddressError,
)
from netkit.geolocation import GeolocationClient
from netkit.inspector import IPInspector
from netkit.models import GeoInfo

GEO = GeoInfo(ip="8.8.8.8", continent="North America", country="United States",
              region="California", org="Google LLC", isp="Google LLC")


class TestIPInspector:
    """Test cases for IPInspector class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.client = MagicMock(spec=GeolocationClient)
        self.client.lookup.return_value = GEO
        self.inspector = IPInspector(geolocation_client=self.client)

    def test_public_address_is_enriched(self):
        """Test public addresses get geo info from the client."""
        report = self.inspector.inspect("8.8.8.8")

        self.client.lookup.assert_called_once_with("8.8.8.8")
        assert report.ip == "8.8.8.8"
        assert report.classification.scope == "Public"
        assert report.classification.ip_class == "Class A"
        assert report.geo == GEO

    @pytest.mark.parametrize("ip", ["10.0.0.1", "192.168.1.1", "127.0.0.1", "::1"])
    def test_private_address_skips_lookup(self, ip):
        """Test the geolocation client is never called for private addresses."""
        report = self.inspector.inspect(ip)

        self.client.lookup.assert_not_called()
        assert report.classification.scope == "Private"
        assert report.geo is None

    @pytest.mark.parametrize("ip", ["999.1.1.1", "not-an-ip", ""])
    def test_invalid_address_raises_before_lookup(self, ip):
        """Test invalid input stops before any network call."""
        with pytest.raises(InvalidAddressError):
            self.inspector.inspect(ip)

        self.client.lookup.assert_not_called()

    @pytest.mark.parametrize("error", [
        GeoTransportError("8.8.8.8", "timed out"),
        GeoDecodeError("8.8.8.8", "invalid JSON"),
        GeoNoDataError("8.8.8.8"),
    ])
    def test_lookup_failures_are_swallowed(self, error):
        """Test any geolocation failure leaves the report without geo info."""
        self.client.lookup.side_effect = error

        report = self.inspector.inspect("8.8.8.8")

        assert report.classification.scope == "Public"
        assert report.geo is None

    def test_unexpected_errors_propagate(self):
        """Test that programming errors are not hidden by the enrichment policy."""
        self.client.lookup.side_effect = TypeError("bug")

        with pytest.raises(TypeError):
            self.inspector.inspect("8.8.8.8")

    def test_client_created_lazily(self):
        """Test the default client is only built when a lookup is needed."""
        inspector = IPInspector()

        inspector.inspect("10.0.0.1")

        assert inspector._geolocation_client is None

    def test_report_to_dict(self):
        """Test the dictionary form of a report."""
        report = self.inspector.inspect("8.8.8.8")

        assert report.to_dict() == {
            'ip': '8.8.8.8',
            'version': 'IPv4',
            'class': 'Class A',
            'scope': 'Public',
            'geo': {
                'ip': '8.8.8.8',
                'continent': 'North America',
                'country': 'United States',
                'region': 'California',
                'org': 'Google LLC',
                'isp': 'Google LLC',
            },
        }
