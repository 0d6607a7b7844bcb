"""
Security utilities for netkit.

Error text from the HTTP stack can echo request details back to us. This
module cleans it before it reaches the debug log.
"""

import re
import html

_SOURCE_PATH = re.compile(r'/[a-zA-Z0-9/_\-\.]+\.py')


class SecurityValidator:
    """Sanitising helpers for diagnostic output."""

    def sanitize_output_text(self, text: str, max_length: int = 1000) -> str:
        """
        Sanitize text for safe output.

        Args:
            text: Text to sanitize
            max_length: Maximum allowed length

        Returns:
            Truncated, HTML-escaped text with control characters hex-escaped
        """
        if not text:
            return ""

        text = html.escape(str(text)[:max_length], quote=True)

        sanitized = []
        for char in text:
            if char.isprintable() or char in {' ', '\t', '\n'}:
                sanitized.append(char)
            else:
                sanitized.append(f"\\x{ord(char):02x}")
        return "".join(sanitized)

    def sanitize_error_message(self, error_msg: str) -> str:
        """
        Sanitize error messages before they reach the debug log.

        Args:
            error_msg: Original error message

        Returns:
            Sanitized error message safe for logging
        """
        sanitized = _SOURCE_PATH.sub('[PATH]', str(error_msg))

        return self.sanitize_output_text(sanitized, 500)


# Global security validator instance
security = SecurityValidator()
