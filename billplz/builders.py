"""
Request builders for the mutating Billplz operations.

A builder takes the required fields up front, records optional fields
through chainable setters (last write wins) and performs exactly one
POST on send(). A builder can only be sent once.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .errors import BuilderConsumedError
from .response import parse_response
from .schemas.bank import Bank
from .schemas.bill import Bill, BillResponse
from .schemas.collection import Collection, CollectionResponse, SplitPayment
from .schemas.payout import Payout, PayoutCollection

if TYPE_CHECKING:
    from .client import BillplzClient


class _RequestBuilder(ABC):
    path: str = ""

    def __init__(self, client: "BillplzClient"):
        self._client = client
        self._sent = False

    @abstractmethod
    def _build(self):
        """Request model for the fields recorded so far."""

    def payload(self) -> Dict[str, Any]:
        """JSON body that send() would POST."""
        return self._build().to_payload()

    async def _post(self):
        if self._sent:
            raise BuilderConsumedError(f"{type(self).__name__} has already been sent")
        body = self.payload()
        self._sent = True
        return await self._client._post(self.path, json_payload=body)


class CreateCollectionBuilder(_RequestBuilder):
    path = "/api/v4/collections"

    def __init__(self, client: "BillplzClient", title: str):
        super().__init__(client)
        self._title = title
        self._split_header: Optional[bool] = None
        self._split_payments: List[SplitPayment] = []

    def split_header(self, split_header: bool) -> "CreateCollectionBuilder":
        self._split_header = split_header
        return self

    def split_payment(self, email: str, stack_order: int) -> "CreateCollectionBuilder":
        self._split_payments.append(SplitPayment(email=email, stack_order=stack_order))
        return self

    def split_payment_with_fixed_cut(
        self, email: str, fixed_cut: int, stack_order: int
    ) -> "CreateCollectionBuilder":
        self._split_payments.append(
            SplitPayment(email=email, fixed_cut=fixed_cut, stack_order=stack_order)
        )
        return self

    def split_payment_with_variable_cut(
        self, email: str, variable_cut: str, stack_order: int
    ) -> "CreateCollectionBuilder":
        self._split_payments.append(
            SplitPayment(email=email, variable_cut=variable_cut, stack_order=stack_order)
        )
        return self

    def _build(self) -> Collection:
        fields: Dict[str, Any] = {"title": self._title}
        if self._split_header is not None:
            fields["split_header"] = self._split_header
        # no splits -> no split_payments key at all
        if self._split_payments:
            fields["split_payments"] = list(self._split_payments)
        return Collection(**fields)

    async def send(self) -> CollectionResponse:
        resp = await self._post()
        return parse_response(resp.status_code, resp.text, CollectionResponse)


class CreateBillBuilder(_RequestBuilder):
    path = "/api/v3/bills"

    def __init__(
        self,
        client: "BillplzClient",
        collection_id: str,
        email: str,
        name: str,
        amount: int,
        callback_url: str,
        description: str,
        due_at: str,
    ):
        super().__init__(client)
        self._required: Dict[str, Any] = {
            "collection_id": collection_id,
            "email": email,
            "name": name,
            "amount": amount,
            "callback_url": callback_url,
            "description": description,
            "due_at": due_at,
        }
        self._optional: Dict[str, Any] = {}

    def _set(self, field: str, value: Any) -> "CreateBillBuilder":
        self._optional[field] = value
        return self

    def mobile(self, mobile: str) -> "CreateBillBuilder":
        return self._set("mobile", mobile)

    def redirect_url(self, redirect_url: str) -> "CreateBillBuilder":
        return self._set("redirect_url", redirect_url)

    def deliver(self, deliver: bool) -> "CreateBillBuilder":
        return self._set("deliver", deliver)

    def reference_1_label(self, label: str) -> "CreateBillBuilder":
        return self._set("reference_1_label", label)

    def reference_1(self, reference: str) -> "CreateBillBuilder":
        return self._set("reference_1", reference)

    def reference_2_label(self, label: str) -> "CreateBillBuilder":
        return self._set("reference_2_label", label)

    def reference_2(self, reference: str) -> "CreateBillBuilder":
        return self._set("reference_2", reference)

    def _build(self) -> Bill:
        return Bill(**self._required, **self._optional)

    async def send(self) -> BillResponse:
        resp = await self._post()
        return parse_response(resp.status_code, resp.text, BillResponse)


class CreateBankVerificationBuilder(_RequestBuilder):
    path = "/api/v3/bank_verification_services"

    def __init__(self, client: "BillplzClient", name: str, id_no: str, acc_no: str, code: str):
        super().__init__(client)
        self._name = name
        self._id_no = id_no
        self._acc_no = acc_no
        self._code = code
        self._organization = False

    def organization(self, organization: bool) -> "CreateBankVerificationBuilder":
        self._organization = organization
        return self

    def _build(self) -> Bank:
        return Bank(
            name=self._name,
            id_no=self._id_no,
            acc_no=self._acc_no,
            code=self._code,
            organization=self._organization,
        )

    async def send(self) -> str:
        resp = await self._post()
        return resp.text


class CreatePayoutBuilder(_RequestBuilder):
    path = "/api/v4/mass_payment_instructions"

    def __init__(
        self,
        client: "BillplzClient",
        mass_payment_instruction_collection_id: str,
        bank_code: str,
        bank_account_number: str,
        identity_number: str,
        name: str,
        description: str,
        total: int,
    ):
        super().__init__(client)
        self._payout = Payout(
            mass_payment_instruction_collection_id=mass_payment_instruction_collection_id,
            bank_code=bank_code,
            bank_account_number=bank_account_number,
            identity_number=identity_number,
            name=name,
            description=description,
            total=total,
        )

    def _build(self) -> Payout:
        return self._payout

    async def send(self) -> str:
        resp = await self._post()
        return resp.text


class CreatePayoutCollectionBuilder(_RequestBuilder):
    path = "/api/v4/mass_payment_instruction_collections"

    def __init__(self, client: "BillplzClient", title: str):
        super().__init__(client)
        self._title = title

    def _build(self) -> PayoutCollection:
        return PayoutCollection(title=self._title)

    async def send(self) -> str:
        resp = await self._post()
        return resp.text
