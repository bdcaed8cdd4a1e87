"""
LogHaven Internal Logging Infrastructure

Diagnostics LogHaven emits about its own operation are routed through
structlog rather than through LogHaven repositories, so that a misbehaving
repository can still be reported on.
"""

from .config import InternalLogConfig, get_log_config, get_logger, reset_logging

__all__ = [
    'InternalLogConfig',
    'get_log_config',
    'get_logger',
    'reset_logging',
]
