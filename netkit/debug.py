"""
Debug utilities for netkit.

When ``NETKIT_DEBUG`` is set, this module writes timestamped diagnostics
about lookups and classification to stderr. stdout is left to the report.
"""

import sys
import time
import json
from typing import Any, Dict, Optional, Callable
from functools import wraps
from .config import config
from .security import security

LEVELS = {'basic': 0, 'detailed': 1, 'verbose': 2}


class DebugLogger:
    """Debug logger for low-level diagnostics."""

    def __init__(self):
        self.start_time = time.time()
        self.call_count = 0

    def log(self, level: str, message: str, data: Optional[Dict[str, Any]] = None):
        """
        Log debug message with optional data.

        Args:
            level: Debug level ('basic', 'detailed', 'verbose')
            message: Debug message
            data: Optional data to include
        """
        if not config.is_debug_mode():
            return

        current_level = config.get_debug_level()
        if LEVELS.get(level, 0) > LEVELS.get(current_level, 0):
            return

        timestamp = time.time() - self.start_time
        print(f"[DEBUG +{timestamp:.3f}s] {message}", file=sys.stderr)

        if data and current_level in ('detailed', 'verbose'):
            self._print_data(data, current_level)

    def _print_data(self, data: Dict[str, Any], level: str):
        if level == 'verbose':
            formatted = json.dumps(data, indent=2, default=str)
            for line in formatted.split('\n'):
                print(f"[DEBUG]   {line}", file=sys.stderr)
            return

        for key, value in data.items():
            if isinstance(value, dict):
                print(f"[DEBUG]   {key}: {len(value)} items", file=sys.stderr)
            elif isinstance(value, str) and len(value) > 100:
                print(f"[DEBUG]   {key}: '{value[:97]}...'", file=sys.stderr)
            else:
                print(f"[DEBUG]   {key}: {value}", file=sys.stderr)

    def log_call(self, owner: str, method: str, args: tuple = ()):
        self.call_count += 1
        call_args = ", ".join(str(arg) for arg in args)
        self.log('basic', f"Call #{self.call_count}: {owner}.{method}({call_args})")

    def log_result(self, owner: str, method: str, result: Any, execution_time: float):
        self.log('basic', f"Result: {owner}.{method} -> {self._summarize_result(result)} ({execution_time:.3f}s)")
        self.log('detailed', f"Full result data for {owner}.{method}:", {'result': result})

    def log_error(self, owner: str, method: str, error: Exception, execution_time: float):
        error_msg = security.sanitize_error_message(str(error))[:100]
        self.log('basic', f"Error: {owner}.{method} -> {type(error).__name__}: {error_msg} ({execution_time:.3f}s)")

    def _summarize_result(self, result: Any) -> str:
        """Create a summary of the result for logging."""
        if result is None:
            return "None"
        elif isinstance(result, dict):
            return f"dict({len(result)} keys)"
        elif isinstance(result, str):
            return f"str({len(result)} chars)"
        else:
            return type(result).__name__

    def log_inspection_start(self, target: str):
        self.log('basic', f"Starting inspection of: {target}")

    def log_inspection_complete(self, target: str, total_time: float, enriched: bool):
        geo = "with geo info" if enriched else "without geo info"
        self.log('basic', f"Completed inspection of {target} {geo}: {total_time:.3f}s total")

    def log_config_info(self):
        """Log current configuration in debug mode."""
        if not config.is_debug_mode():
            return

        self.log('detailed', "Current configuration:", {
            'debug_level': config.get_debug_level(),
            'request_timeout': config.get_request_timeout(),
        })


def debug_lookup_method(func: Callable) -> Callable:
    """
    Decorator to add debug logging to lookup methods.

    Logs the call, a summary of the result or the error, and the time
    taken. Exceptions are re-raised unchanged.
    """
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        if not config.is_debug_mode():
            return func(self, *args, **kwargs)

        owner = getattr(self, 'name', self.__class__.__name__)
        method_name = func.__name__
        debug_logger.log_call(owner, method_name, args)

        start_time = time.time()
        try:
            result = func(self, *args, **kwargs)
        except Exception as e:
            debug_logger.log_error(owner, method_name, e, time.time() - start_time)
            raise
        debug_logger.log_result(owner, method_name, result, time.time() - start_time)
        return result

    return wrapper


# Global debug logger instance
debug_logger = DebugLogger()
