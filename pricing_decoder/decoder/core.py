"""
Structured decoder for `Builtin` pricing records.

Objects are decoded with a small slot accumulator instead of letting pydantic
validate the whole document: pydantic would silently keep the last of two
repeated keys and reports every problem at once, whereas here each object must
name every field exactly once and the first problem, in input order, wins.

Scalar checks (strict strings, unsigned 64-bit integers) are delegated to
pydantic `TypeAdapter`s and their `ValidationError`s converted to
`ShapeMismatchError`.

Usage:
    from pricing_decoder.decoder import decode_builtin_json

    builtin = decode_builtin_json('{"name": "foo", "pricing": [], "at": 1}')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

from pydantic import StrictStr, TypeAdapter, ValidationError

from pricing_decoder.decoder.document import iter_pairs, load_document, structural_kind
from pricing_decoder.decoder.errors import (
    DuplicateFieldError,
    MissingFieldError,
    Path,
    ShapeMismatchError,
    UnknownFieldError,
)
from pricing_decoder.domain.models import Builtin, Pricing, PricingAt, UInt64
from pricing_decoder.utils.logging import get_logger

log = get_logger(__name__)

_UINT64 = TypeAdapter(UInt64)
_STRING = TypeAdapter(StrictStr)

FieldDecoder = Callable[[Any, Path], Any]


@dataclass(frozen=True)
class FieldSpec:
    """A recognised field name and the decoder for its value."""

    name: str
    decode: FieldDecoder


class FieldSlots:
    """
    One empty slot per recognised field, filled while walking an object.

    Keys are matched case-sensitively with no aliases. A key outside `fields`
    raises `UnknownFieldError`; a second occurrence of a key raises
    `DuplicateFieldError` whatever its value.
    """

    _EMPTY = object()

    def __init__(self, fields: Sequence[FieldSpec], path: Path = ()) -> None:
        self._fields = {spec.name: spec for spec in fields}
        self._order = tuple(spec.name for spec in fields)
        self._values: Dict[str, Any] = {name: self._EMPTY for name in self._order}
        self._path = path

    def accept(self, key: Any, value: Any) -> None:
        spec = self._fields.get(key) if isinstance(key, str) else None
        if spec is None:
            raise UnknownFieldError(str(key), self._order, self._path)
        if self._values[spec.name] is not self._EMPTY:
            raise DuplicateFieldError(spec.name, self._path)
        self._values[spec.name] = spec.decode(value, self._path + (spec.name,))

    def finish(self) -> Dict[str, Any]:
        for name in self._order:
            if self._values[name] is self._EMPTY:
                raise MissingFieldError(name, self._path)
        return dict(self._values)


def decode_fields(document: Any, fields: Sequence[FieldSpec], path: Path = ()) -> Dict[str, Any]:
    """Walk one map-shaped value and return its decoded field values."""
    slots = FieldSlots(fields, path)
    for key, value in iter_pairs(document, path):
        slots.accept(key, value)
    return slots.finish()


_RENDER_BITS = 1024


def _describe_integer(value: int) -> str:
    # Huge ints cannot be turned into text past the int/str digit limit.
    if abs(value).bit_length() > _RENDER_BITS:
        return "integer out of range"
    return f"integer `{value}`"


def _scalar(adapter: TypeAdapter, expected: str) -> FieldDecoder:
    def decode(value: Any, path: Path) -> Any:
        try:
            return adapter.validate_python(value)
        except ValidationError as exc:
            found = structural_kind(value)
            if found == "integer":
                found = _describe_integer(value)
            raise ShapeMismatchError(expected, found, path) from exc

    return decode


decode_uint64 = _scalar(_UINT64, "unsigned 64-bit integer")
decode_string = _scalar(_STRING, "string")

PRICING_FIELDS: Tuple[FieldSpec, ...] = (FieldSpec("price", decode_uint64),)
PRICING_AT_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("price", decode_uint64),
    FieldSpec("at", decode_uint64),
)


def decode_pricing(document: Any, path: Path = ()) -> Pricing:
    """Decode a price-only `{price}` object."""
    return Pricing(**decode_fields(document, PRICING_FIELDS, path))


def decode_pricing_at(document: Any, path: Path = ()) -> PricingAt:
    """Decode a `{price, at}` object."""
    return PricingAt(**decode_fields(document, PRICING_AT_FIELDS, path))


def decode_pricing_history(value: Any, path: Path = ()) -> Tuple[PricingAt, ...]:
    """
    Decode the `pricing` field: a sequence of `{price, at}` objects.

    Only the sequence shape is accepted. A single bare object is rejected with
    a shape mismatch rather than wrapped into a one-element history; how the
    outer `at` would combine with a bare price is undecided.
    """
    kind = structural_kind(value)
    if kind != "sequence":
        raise ShapeMismatchError("sequence", kind, path)
    return tuple(
        decode_pricing_at(item, path + (index,)) for index, item in enumerate(value)
    )


BUILTIN_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("name", decode_string),
    FieldSpec("pricing", decode_pricing_history),
    FieldSpec("at", decode_uint64),
)


def decode_builtin(document: Any) -> Builtin:
    """
    Decode a parsed document into a `Builtin`.

    Parameters
    ----------
    document : Any
        A `DocumentObject` from `load_document`, or any mapping.

    Raises
    ------
    DecodeError
        The first unknown, duplicate or missing field or shape mismatch found.
    """
    builtin = Builtin(**decode_fields(document, BUILTIN_FIELDS))
    log.debug(
        "Decoded builtin",
        extra={"builtin_name": builtin.name, "entries": len(builtin.pricing)},
    )
    return builtin


def decode_builtin_json(raw: Union[str, bytes, bytearray]) -> Builtin:
    """Parse raw JSON and decode it into a `Builtin`."""
    return decode_builtin(load_document(raw))


def encode_builtin(builtin: Builtin) -> Dict[str, Any]:
    """Encode a `Builtin` back to its document shape."""
    return builtin.model_dump(mode="json")


def encode_builtin_json(builtin: Builtin, indent: Optional[int] = None) -> str:
    return builtin.model_dump_json(indent=indent)


__all__ = [
    "BUILTIN_FIELDS",
    "FieldSlots",
    "FieldSpec",
    "PRICING_AT_FIELDS",
    "PRICING_FIELDS",
    "decode_builtin",
    "decode_builtin_json",
    "decode_fields",
    "decode_pricing",
    "decode_pricing_at",
    "decode_pricing_history",
    "decode_string",
    "decode_uint64",
    "encode_builtin",
    "encode_builtin_json",
]
