from billplz.schemas import Bank, Bill, BillResponse, Collection, CollectionResponse, SplitPayment


def test_bill_payload_omits_unset_optionals():
    bill = Bill(
        collection_id="col1",
        email="a@test.com",
        name="A",
        amount=100,
        callback_url="https://cb",
        description="d",
        due_at="2024-01-01",
    )

    payload = bill.to_payload()

    assert "mobile" not in payload
    assert "deliver" not in payload
    assert payload["amount"] == 100


def test_bill_payload_keeps_falsy_values_that_were_set():
    bill = Bill(
        collection_id="col1",
        email="a@test.com",
        name="A",
        amount=0,
        callback_url="https://cb",
        description="d",
        due_at="2024-01-01",
        deliver=False,
        reference_1="",
    )

    payload = bill.to_payload()

    assert payload["deliver"] is False
    assert payload["reference_1"] == ""
    assert payload["amount"] == 0


def test_collection_payload_nested_split_omission():
    collection = Collection(
        title="T",
        split_payments=[SplitPayment(email="p@test.com", variable_cut="10", stack_order=2)],
    )

    assert collection.to_payload() == {
        "title": "T",
        "split_payments": [{"email": "p@test.com", "variable_cut": "10", "stack_order": 2}],
    }


def test_bank_payload_always_has_organization():
    bank = Bank(name="A", id_no="1", acc_no="2", code="MBBEMYKL")
    assert bank.to_payload()["organization"] is False


def test_bill_response_round_trip():
    request = Bill(
        collection_id="col1",
        email="a@test.com",
        name="A",
        amount=2500,
        callback_url="https://cb",
        description="d",
        due_at="2024-01-01",
        mobile="6012",
    )
    echoed = {**request.to_payload(), "id": "b1", "paid": False, "state": "due"}

    resp = BillResponse.model_validate(echoed)

    for key, value in request.to_payload().items():
        assert getattr(resp, key) == value


def test_collection_response_logo():
    resp = CollectionResponse.model_validate(
        {"id": "c1", "title": "T", "logo": {"thumb_url": "https://t", "avatar_url": None}, "status": "active"}
    )
    assert resp.logo.thumb_url == "https://t"
    assert resp.logo.avatar_url is None


def test_none_optionals_are_never_sent_as_null():
    bill = Bill(
        collection_id="col1",
        email="a@test.com",
        name="A",
        amount=100,
        callback_url="https://cb",
        description="d",
        due_at="2024-01-01",
        mobile=None,
        deliver=False,
    )
    collection = Collection(
        title="T",
        split_header=None,
        split_payments=[SplitPayment(email="p@test.com", fixed_cut=None, variable_cut="5", stack_order=0)],
    )

    payload = bill.to_payload()
    assert "mobile" not in payload
    assert payload["deliver"] is False
    assert collection.to_payload() == {
        "title": "T",
        "split_payments": [{"email": "p@test.com", "variable_cut": "5", "stack_order": 0}],
    }


def test_collection_response_tolerates_partial_split_entry():
    resp = CollectionResponse.model_validate_json(
        '{"id":"c1","title":"T","split_payments":[{"email":"p@x.com","fixed_cut":100,"extra":"kept"}]}'
    )

    split = resp.split_payments[0]
    assert split.email == "p@x.com"
    assert split.fixed_cut == 100
    assert split.stack_order is None
    assert split.model_extra == {"extra": "kept"}
