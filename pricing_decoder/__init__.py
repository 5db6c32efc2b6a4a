"""
pricing_decoder - time-stamped pricing records and a strict JSON decoder.

This package provides:

- Value objects for pricing data (`Pricing`, `PricingAt`, `Builtin`)
- A decoder that turns a JSON document into a `Builtin`, rejecting unknown,
  duplicate and missing fields and mis-shaped values with precise errors
- Symmetric encoding of a `Builtin` back to its document shape
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from pricing_decoder.config import Settings, get_settings
from pricing_decoder.decoder import (
    DecodeError,
    DuplicateFieldError,
    MalformedDocumentError,
    MissingFieldError,
    ShapeMismatchError,
    UnknownFieldError,
    decode_builtin,
    decode_builtin_json,
    decode_pricing,
    decode_pricing_at,
    encode_builtin,
    encode_builtin_json,
)
from pricing_decoder.domain import Builtin, Pricing, PricingAt
from pricing_decoder.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Builtin",
    "Pricing",
    "PricingAt",
    # Decoding
    "decode_builtin",
    "decode_builtin_json",
    "decode_pricing",
    "decode_pricing_at",
    "encode_builtin",
    "encode_builtin_json",
    # Errors
    "DecodeError",
    "DuplicateFieldError",
    "MalformedDocumentError",
    "MissingFieldError",
    "ShapeMismatchError",
    "UnknownFieldError",
    # Logging
    "configure_logging",
    "get_logger",
]
