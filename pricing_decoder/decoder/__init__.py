"""
Decoder package for the pricing decoder.

Re-exports the decode/encode operations and the error taxonomy so callers can
import from `pricing_decoder.decoder` directly.
"""

from pricing_decoder.decoder.core import (
    decode_builtin,
    decode_builtin_json,
    decode_pricing,
    decode_pricing_at,
    encode_builtin,
    encode_builtin_json,
)
from pricing_decoder.decoder.document import DocumentObject, load_document, structural_kind
from pricing_decoder.decoder.errors import (
    DecodeError,
    DuplicateFieldError,
    MalformedDocumentError,
    MissingFieldError,
    ShapeMismatchError,
    UnknownFieldError,
)

__all__ = [
    # Operations
    "decode_builtin",
    "decode_builtin_json",
    "decode_pricing",
    "decode_pricing_at",
    "encode_builtin",
    "encode_builtin_json",
    # Documents
    "DocumentObject",
    "load_document",
    "structural_kind",
    # Errors
    "DecodeError",
    "DuplicateFieldError",
    "MalformedDocumentError",
    "MissingFieldError",
    "ShapeMismatchError",
    "UnknownFieldError",
]
