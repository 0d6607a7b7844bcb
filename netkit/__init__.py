"""
netkit - IP address information tool.

This package classifies a single IP address (version, IPv4 class and
private/public scope) and enriches public addresses with geolocation
data from the ipwho.is service.
"""

__version__ = "0.1.0"
__license__ = "Apache License 2.0"
