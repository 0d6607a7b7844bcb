"""
Report formatting.
"""

import sys
from typing import List, Optional, TextIO
from .classifier import IPV4
from .models import Report


def format_report(report: Report) -> str:
    """Render a report as the fixed multi-line text block."""
    classification = report.classification

    lines: List[str] = [
        f"IP Address: {report.ip}",
        f"  Version: {classification.version}",
    ]
    if classification.version == IPV4:
        lines.append(f"  Class: {classification.ip_class}")
    lines.append(f"  Scope: {classification.scope}")

    geo = report.geo
    if classification.is_public and geo is not None:
        lines.extend([
            "  Geo Info:",
            f"    Continent: {geo.continent}",
            f"    Country:   {geo.country}",
            f"    Region:    {geo.region}",
            f"    ISP:       {geo.isp}",
            f"    Org:       {geo.org}",
        ])

    return "\n".join(lines) + "\n"


def print_report(report: Report, stream: Optional[TextIO] = None):
    """Write a report to stdout, or to the given stream."""
    (stream or sys.stdout).write(format_report(report))
