"""
Settings, logging and errors shared by the printer and federation layers
"""

from .config import Settings, get_settings, parse_major_version
from .errors import (
    ErrorCode,
    SchemaPrintError,
    UnsupportedTypeError,
    UnsupportedOperationError,
    InvalidFederationVersionError,
    InvalidArgumentValueError,
)
from .logging_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "parse_major_version",
    "ErrorCode",
    "SchemaPrintError",
    "UnsupportedTypeError",
    "UnsupportedOperationError",
    "InvalidFederationVersionError",
    "InvalidArgumentValueError",
    "configure_logging",
]
