"""
IP inspection workflow.

Runs the linear pipeline for one address: parse, classify and, for public
addresses only, enrich with geolocation data.
"""

import time
import logging
from typing import Optional
from .classifier import classify
from .debug import debug_logger
from .errors import GeoLookupError
from .geolocation import GeolocationClient
from .models import Report
from .validator import AddressParser

logger = logging.getLogger(__name__)


class IPInspector:
    """Coordinates parsing, classification and geolocation of one address."""

    def __init__(self, parser: Optional[AddressParser] = None,
                 geolocation_client: Optional[GeolocationClient] = None):
        self.parser = parser or AddressParser()
        self._geolocation_client = geolocation_client

    @property
    def geolocation_client(self) -> GeolocationClient:
        # Created on the first public lookup
        if self._geolocation_client is None:
            self._geolocation_client = GeolocationClient()
        return self._geolocation_client

    def inspect(self, ip_string: str) -> Report:
        """
        Build the report for an IP address.

        Geolocation is best-effort: any lookup failure leaves the report
        without geo info instead of failing the inspection.

        Args:
            ip_string: The IP address text to inspect

        Returns:
            Report for the address

        Raises:
            InvalidAddressError: If the text is not a valid IP address
        """
        start_time = time.time()
        debug_logger.log_inspection_start(ip_string)
        debug_logger.log_config_info()

        parsed = self.parser.parse(ip_string)
        classification = classify(parsed)
        debug_logger.log('detailed', "Classification:", {
            'version': classification.version,
            'class': classification.ip_class,
            'scope': classification.scope,
        })

        geo = None
        if classification.is_public:
            try:
                geo = self.geolocation_client.lookup(ip_string)
            except GeoLookupError as e:
                logger.debug(f"Geolocation skipped for {ip_string}: {e}")

        report = Report(address=parsed, classification=classification, geo=geo)
        debug_logger.log_inspection_complete(ip_string, time.time() - start_time, geo is not None)
        debug_logger.log('verbose', "Report:", report.to_dict())
        return report
