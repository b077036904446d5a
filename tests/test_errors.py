import json

import pytest

from papi.errors import (
    INVALID_PARAMS,
    NOT_FOUND,
    UNKNOWN_ERROR,
    Error,
    ErrorDocumentor,
    Errors,
    FrozenError,
    InvalidOpenAPIError,
    MissingOpenAPIError,
)


def test_error_defaults_to_status_400():
    err = Error("TOO_SHORT", "Too short")
    assert err.status == 400
    assert err.code == "TOO_SHORT"
    assert str(err) == "Too short"


def test_error_is_raisable():
    err = Error("BAD", "Bad thing", 422)
    assert (err.status, err.message, str(err)) == (422, "Bad thing", "Bad thing")
    with pytest.raises(Error, match="Bad thing"):
        raise err


def test_error_to_dict_omits_empty_fields():
    err = Error("TOO_SHORT", "Too short")
    assert err.to_dict() == {"code": "TOO_SHORT", "message": "Too short"}


def test_error_to_dict_key_order():
    err = Error("TOO_SHORT", "Too short", location="password", expect="7", details="d")
    assert list(err.to_dict()) == ["code", "message", "location", "expect", "details"]


def test_error_document_wraps_error():
    err = Error("TOO_SHORT", "Too short", location="password")
    assert err.error_document() == {"errors": [err.to_dict()]}


def test_error_reset_clears_fields():
    err = Error("TOO_SHORT", "Too short", location="password", expect="7")
    err.reset()
    assert (err.status, err.code, err.message, err.location, err.expect) == (
        0, "", "", "", ""
    )


def test_error_is_error_documentor():
    documentors = [Error("A", "b"), NOT_FOUND]
    assert all(isinstance(d, ErrorDocumentor) for d in documentors)
    assert [d.status for d in documentors] == [400, 404]
    assert NOT_FOUND.error_document() == {
        "errors": [
            {"code": "NOT_FOUND", "message": "The API route could not be found"}
        ]
    }


def test_empty_errors():
    errs = Errors()
    assert not errs.has_error()
    assert str(errs) == "(no error)"
    assert errs.status == 200
    assert errs.error_document() == {"errors": []}


def test_errors_string_format():
    errs = Errors()
    errs.append(Error("TOO_SHORT", "Too short", location="password", expect="7"))
    errs.append(Error("REQUIRED", "Required"))
    assert str(errs) == "password - TOO_SHORT: Too short (7)\nREQUIRED: Required"


def test_errors_status_is_first():
    errs = Errors([Error("A", "a", 409), Error("B", "b", 500)])
    assert errs.status == 409
    assert len(errs) == 2


def test_errors_merge_and_iterate():
    first = Errors([Error("A", "a")])
    second = Errors([Error("B", "b"), Error("C", "c")])
    first.merge(second)
    assert [e.code for e in first] == ["A", "B", "C"]
    assert first[1].code == "B"


def test_errors_to_list_and_document():
    errs = Errors([Error("A", "a"), Error("B", "b", location="x")])
    assert errs.to_list() == [errs[0].to_dict(), errs[1].to_dict()]
    assert errs.error_document() == {"errors": errs.to_list()}


def test_errors_reset_empties():
    item = Error("A", "a")
    errs = Errors([item])
    errs.reset()
    assert len(errs) == 0
    assert item.code == ""


def test_frozen_error_explained():
    err = NOT_FOUND.explained("route", "a path")
    assert (err.status, err.code, err.location, err.expect, err.details) == (
        404, "NOT_FOUND", "route", "a path", ""
    )
    assert err.message == "The API route could not be found"


def test_frozen_error_detailed():
    err = UNKNOWN_ERROR.detailed("boom")
    assert err.status == 500
    assert err.details == "boom"
    assert err.location == ""
    assert UNKNOWN_ERROR.detailed("boom", "field").location == "field"


def test_frozen_error_unchanged_by_derived_errors():
    derived = INVALID_PARAMS.explained("route", "2")
    derived.reset()
    assert INVALID_PARAMS.to_dict() == {
        "code": "INVALID_PARAMS",
        "message": "URL params count mismatch",
    }
    assert INVALID_PARAMS.status == 500


def test_frozen_error_document_json():
    doc = json.dumps(FrozenError("X", "y").error_document())
    assert doc == '{"errors": [{"code": "X", "message": "y"}]}'
    assert FrozenError("X", "y").status == 400


def test_plain_errors_messages():
    assert str(MissingOpenAPIError()) == "no OpenAPI documentation initialized"
    with pytest.raises(ValueError):
        raise InvalidOpenAPIError()