"""
Domain package for the pricing decoder.

Exports the value objects produced by the decoder.
Keep this package focused on data definitions and validation concerns.
"""

from pricing_decoder.domain.models import U64_MAX, Builtin, Pricing, PricingAt

__all__ = [
    "Builtin",
    "Pricing",
    "PricingAt",
    "U64_MAX",
]
