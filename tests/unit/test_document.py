from __future__ import annotations

import pytest

from pricing_decoder.decoder.document import (
    DocumentObject,
    iter_pairs,
    load_document,
    structural_kind,
)
from pricing_decoder.decoder.errors import MalformedDocumentError, ShapeMismatchError


def test_load_document_keeps_duplicate_keys_in_order() -> None:
    document = load_document('{"b": 1, "a": 2, "b": 3}')

    assert isinstance(document, DocumentObject)
    assert list(iter_pairs(document)) == [("b", 1), ("a", 2), ("b", 3)]


def test_load_document_accepts_bytes() -> None:
    document = load_document(b'{"price": 1}')

    assert list(document) == [("price", 1)]


def test_load_document_reports_syntax_position() -> None:
    with pytest.raises(MalformedDocumentError) as excinfo:
        load_document('{\n  "name": }')

    assert excinfo.value.lineno == 2
    assert excinfo.value.code == "malformed_document"
    assert "line 2" in str(excinfo.value)


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (DocumentObject([("a", 1)]), "map"),
        ({"a": 1}, "map"),
        ([], "sequence"),
        ((1, 2), "sequence"),
        ("x", "string"),
        (1, "integer"),
        (1.0, "float"),
        (True, "boolean"),
        (None, "null"),
    ],
)
def test_structural_kind(value: object, kind: str) -> None:
    assert structural_kind(value) == kind


def test_iter_pairs_rejects_non_map() -> None:
    with pytest.raises(ShapeMismatchError) as excinfo:
        list(iter_pairs("text", ("pricing", 0)))

    assert excinfo.value.path == ("pricing", 0)
    assert excinfo.value.found == "string"


def test_load_document_rejects_invalid_utf8() -> None:
    with pytest.raises(MalformedDocumentError) as excinfo:
        load_document(b'{"name": "\xff"}')

    assert "invalid encoding" in str(excinfo.value)


def test_load_document_rejects_integer_past_digit_limit() -> None:
    with pytest.raises(MalformedDocumentError):
        load_document('{"at": ' + "9" * 5000 + "}")


def test_load_document_rejects_excessive_nesting() -> None:
    with pytest.raises(MalformedDocumentError) as excinfo:
        load_document("[" * 100000 + "]" * 100000)

    assert str(excinfo.value) == "document nested too deeply"
