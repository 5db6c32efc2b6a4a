"""
Document loading for the decoder.

`json.loads` collapses repeated keys into a dict, which would hide duplicate
fields. `load_document` keeps every key/value pair of each object, in input
order, inside a `DocumentObject` so the field accumulator can see them all.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Iterator, Tuple, Union

from pricing_decoder.decoder.errors import MalformedDocumentError, ShapeMismatchError


class DocumentObject(list):
    """Key/value pairs of one JSON object, duplicates included."""

    def __repr__(self) -> str:
        return f"DocumentObject({list.__repr__(self)})"


def load_document(raw: Union[str, bytes, bytearray]) -> Any:
    """
    Parse a JSON document, preserving key order and duplicate keys of objects.

    Raises
    ------
    MalformedDocumentError
        If `raw` is not valid JSON.
    """
    try:
        return json.loads(raw, object_pairs_hook=DocumentObject)
    except json.JSONDecodeError as exc:
        raise MalformedDocumentError(exc.msg, lineno=exc.lineno, colno=exc.colno) from exc
    except UnicodeDecodeError as exc:
        raise MalformedDocumentError(f"invalid encoding: {exc.reason}") from exc
    except ValueError as exc:
        # Integer literals past the interpreter's int/str digit limit.
        raise MalformedDocumentError(str(exc)) from exc
    except RecursionError as exc:
        raise MalformedDocumentError("document nested too deeply") from exc


def structural_kind(value: Any) -> str:
    """Name the structural kind of a document value."""
    if isinstance(value, (DocumentObject, Mapping)):
        return "map"
    if value is None:
        return "null"
    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return type(value).__name__


def iter_pairs(value: Any, path: Tuple[Any, ...] = ()) -> Iterator[Tuple[Any, Any]]:
    """Yield the pairs of a map-shaped value in input order."""
    if isinstance(value, DocumentObject):
        yield from value
    elif isinstance(value, Mapping):
        yield from value.items()
    else:
        raise ShapeMismatchError("map", structural_kind(value), path)


__all__ = ["DocumentObject", "iter_pairs", "load_document", "structural_kind"]
