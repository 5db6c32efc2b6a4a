"""
Domain models for the pricing decoder.

Value objects for time-stamped pricing information. `Builtin` is the canonical
record produced by `pricing_decoder.decoder.decode_builtin`; `Pricing` and
`PricingAt` are the shapes found inside its `pricing` field.
"""
from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, StrictStr, conint

U64_MAX = 2**64 - 1

# Strict: booleans and floats are rejected rather than coerced.
UInt64 = conint(strict=True, ge=0, le=U64_MAX)


class Pricing(BaseModel):
    """
    A price with no timestamp (legacy wire shape).
    """

    price: UInt64 = Field(..., description="Price quantity, currency-unit agnostic.")

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }


class PricingAt(BaseModel):
    """
    A price paired with the timestamp at which it took effect.
    """

    price: UInt64 = Field(..., description="Price quantity, currency-unit agnostic.")
    at: UInt64 = Field(..., description="Ordinal timestamp of the price.")

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }


class Builtin(BaseModel):
    """
    Canonical decoded pricing record.
    """

    name: StrictStr = Field(..., description="Caller-defined identifier.")
    pricing: Tuple[PricingAt, ...] = Field(
        ..., description="Pricing history in input order."
    )
    at: UInt64 = Field(..., description="As-of timestamp for the whole record.")

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }


__all__ = ["Builtin", "Pricing", "PricingAt", "U64_MAX", "UInt64"]
