import pytest

from billplz.errors import ApiError, ParseError
from billplz.response import is_success, parse_response
from billplz.schemas import BillResponse, CollectionResponse


def test_is_success_bounds():
    assert is_success(200)
    assert is_success(299)
    assert not is_success(199)
    assert not is_success(300)
    assert not is_success(401)


def test_error_envelope_on_failure_status():
    body = '{"error":{"type":"unauthorized","message":"Invalid API key"}}'

    with pytest.raises(ApiError) as exc:
        parse_response(401, body, BillResponse)

    assert exc.value.error_type == "unauthorized"
    assert exc.value.message == "Invalid API key"
    assert str(exc.value) == "API error (unauthorized): Invalid API key"


def test_error_envelope_on_success_status_is_not_an_api_error():
    # a 200 is decoded as the success shape even if it looks like an error
    body = '{"error":{"type":"x","message":"y"}}'

    resp = parse_response(200, body, CollectionResponse)

    assert resp.id is None


def test_success_decodes_model():
    resp = parse_response(200, '{"id":"col1","title":"T","status":"active","extra":"kept"}', CollectionResponse)

    assert resp.id == "col1"
    assert resp.model_extra == {"extra": "kept"}


def test_malformed_body_raises_parse_error_with_cause():
    with pytest.raises(ParseError) as exc:
        parse_response(200, "{broken", BillResponse)

    assert exc.value.cause is not None
    assert exc.value.__cause__ is exc.value.cause


def test_wrong_type_raises_parse_error():
    with pytest.raises(ParseError):
        parse_response(200, '{"amount": "lots"}', BillResponse)


def test_failure_status_with_plain_body_falls_through_to_parse_error():
    with pytest.raises(ParseError) as exc:
        parse_response(500, "Internal Server Error", BillResponse)

    assert exc.value.status_code == 500


def test_collection_with_partial_split_entry_decodes():
    body = '{"id":"c1","title":"T","split_payments":[{"email":"p@x.com","fixed_cut":100}]}'

    resp = parse_response(200, body, CollectionResponse)

    assert resp.id == "c1"
    assert resp.split_payments[0].fixed_cut == 100
    assert resp.split_payments[0].stack_order is None
