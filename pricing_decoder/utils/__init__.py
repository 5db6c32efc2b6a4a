"""
Utilities package for the pricing decoder.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from pricing_decoder.utils.logging import (
    JsonFormatter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "JsonFormatter",
]
