"""
Decode error taxonomy.

Every failure raised by the decoder is a `DecodeError`. Subclasses map onto the
usual deserialisation diagnostics (unknown, duplicate and missing field) plus
shape mismatches and syntax errors reported by the JSON parser.

Each error carries the path of the offending value inside the document, e.g.
``("pricing", 1, "at")``; the root object has the empty path.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple, Union

PathPart = Union[str, int]
Path = Tuple[PathPart, ...]


def format_path(path: Path) -> str:
    """Render a path as ``pricing[1].at``; the root renders as ``<root>``."""
    if not path:
        return "<root>"
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = part
    return rendered


class DecodeError(ValueError):
    """Base class for all decode failures."""

    code = "decode_error"

    def __init__(self, message: str, path: Path = ()) -> None:
        super().__init__(message)
        self.message = message
        self.path = tuple(path)

    def detail(self) -> Dict[str, Any]:
        return {}

    def as_payload(self) -> Dict[str, Any]:
        """Structured form suitable for API responses or JSON logs."""
        return {
            "code": self.code,
            "message": self.message,
            "path": list(self.path),
            "detail": self.detail(),
        }

    def __str__(self) -> str:
        if self.path:
            return f"{format_path(self.path)}: {self.message}"
        return self.message


class UnknownFieldError(DecodeError):
    code = "unknown_field"

    def __init__(self, field: str, expected: Sequence[str], path: Path = ()) -> None:
        self.field = field
        self.expected = tuple(expected)
        names = ", ".join(f"`{name}`" for name in self.expected)
        super().__init__(f"unknown field `{field}`, expected one of {names}", path)

    def detail(self) -> Dict[str, Any]:
        return {"field": self.field, "expected": list(self.expected)}


class DuplicateFieldError(DecodeError):
    code = "duplicate_field"

    def __init__(self, field: str, path: Path = ()) -> None:
        self.field = field
        super().__init__(f"duplicate field `{field}`", path)

    def detail(self) -> Dict[str, Any]:
        return {"field": self.field}


class MissingFieldError(DecodeError):
    code = "missing_field"

    def __init__(self, field: str, path: Path = ()) -> None:
        self.field = field
        super().__init__(f"missing field `{field}`", path)

    def detail(self) -> Dict[str, Any]:
        return {"field": self.field}


class ShapeMismatchError(DecodeError):
    """A value whose structure or scalar type does not fit its field."""

    code = "shape_mismatch"

    def __init__(self, expected: str, found: str, path: Path = ()) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"invalid type: {found} found, {expected} expected", path)

    def detail(self) -> Dict[str, Any]:
        return {"expected": self.expected, "found": self.found}


class MalformedDocumentError(DecodeError):
    """The raw input is not a syntactically valid document."""

    code = "malformed_document"

    def __init__(
        self, message: str, lineno: Optional[int] = None, colno: Optional[int] = None
    ) -> None:
        self.lineno = lineno
        self.colno = colno
        if lineno is not None:
            message = f"{message} at line {lineno} column {colno}"
        super().__init__(message)

    def detail(self) -> Dict[str, Any]:
        return {"lineno": self.lineno, "colno": self.colno}


__all__ = [
    "DecodeError",
    "DuplicateFieldError",
    "MalformedDocumentError",
    "MissingFieldError",
    "Path",
    "ShapeMismatchError",
    "UnknownFieldError",
    "format_path",
]
