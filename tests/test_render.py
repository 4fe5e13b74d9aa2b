from billplz.schemas import BillResponse
from billplz.utils.render import output_json, raw_to_json


def test_output_json_compact_and_pretty():
    assert output_json({"a": 1}, pretty=False) == '{"a": 1}'
    assert output_json({"a": 1}, pretty=True) == '{\n  "a": 1\n}'


def test_output_json_drops_none_fields_of_models():
    rendered = output_json([BillResponse(id="b1")], pretty=False)
    assert rendered == '[{"id": "b1", "paid_amount": 0}]'


def test_raw_to_json_falls_back_to_string():
    assert raw_to_json('{"a": 1}') == {"a": 1}
    assert raw_to_json("<html>") == "<html>"
