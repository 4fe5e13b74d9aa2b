import logging
from typing import Any, Dict, List, Optional

import httpx

from .banks import fpx_banks
from .builders import (
    CreateBankVerificationBuilder,
    CreateBillBuilder,
    CreateCollectionBuilder,
    CreatePayoutBuilder,
    CreatePayoutCollectionBuilder,
)
from .environment import Environment
from .errors import TransportError
from .response import parse_response
from .schemas.bank import FpxBank
from .schemas.bill import BillResponse
from .schemas.collection import CollectionResponse
from .utils.http import client

logger = logging.getLogger(__name__)


class BillplzClient:
    """
    Billplz REST API:
      - GET/POST /api/v4/collections                           (typed)
      - GET/POST /api/v3/bills                                 (typed)
      - GET/POST /api/v3/bank_verification_services            (raw body)
      - GET/POST /api/v4/mass_payment_instructions             (raw body)
      - GET/POST /api/v4/mass_payment_instruction_collections  (raw body)
    Every call is a single request with HTTP Basic auth (api key, empty password).
    """

    def __init__(
        self,
        environment: Optional[Environment],
        api_key: str,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if base_url is None:
            if environment is None:
                raise ValueError("either environment or base_url is required")
            base_url = environment.base_url
        self.environment = environment
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def with_base_url(
        cls,
        base_url: str,
        api_key: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "BillplzClient":
        """Client for a custom host (mock server, proxy). No environment is attached."""
        return cls(None, api_key, base_url=base_url, timeout=timeout, transport=transport)

    # ---- HTTP ----
    async def _request(self, method: str, path: str, json_payload: Optional[Dict[str, Any]] = None) -> httpx.Response:
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            async with client(self.base_url, self.api_key, self.timeout, self._transport) as c:
                resp = await c.request(method, path, json=json_payload)
        except httpx.HTTPError as e:
            raise TransportError(e) from e
        logger.debug("%s %s -> %s", method, path, resp.status_code)
        return resp

    async def _get(self, path: str) -> httpx.Response:
        return await self._request("GET", path)

    async def _post(self, path: str, json_payload: Dict[str, Any]) -> httpx.Response:
        return await self._request("POST", path, json_payload=json_payload)

    # ---- Collections ----
    async def get_collection(self, collection_id: str) -> CollectionResponse:
        resp = await self._get(f"/api/v4/collections/{collection_id}")
        return parse_response(resp.status_code, resp.text, CollectionResponse)

    def create_collection(self, title: str) -> CreateCollectionBuilder:
        return CreateCollectionBuilder(self, title)

    # ---- Bills ----
    async def get_bill(self, bill_id: str) -> BillResponse:
        resp = await self._get(f"/api/v3/bills/{bill_id}")
        return parse_response(resp.status_code, resp.text, BillResponse)

    def create_bill(
        self,
        collection_id: str,
        email: str,
        name: str,
        amount: int,
        callback_url: str,
        description: str,
        due_at: str,
    ) -> CreateBillBuilder:
        return CreateBillBuilder(self, collection_id, email, name, amount, callback_url, description, due_at)

    # ---- Banks ----
    def get_fpx_banks(self) -> List[FpxBank]:
        """Hardcoded FPX bank list; staging also lists the sandbox test banks."""
        return fpx_banks(self.environment)

    async def get_bank_verification(self, bank_account_number: str) -> str:
        resp = await self._get(f"/api/v3/bank_verification_services/{bank_account_number}")
        return resp.text

    def create_bank_verification(self, name: str, id_no: str, acc_no: str, code: str) -> CreateBankVerificationBuilder:
        return CreateBankVerificationBuilder(self, name, id_no, acc_no, code)

    # ---- Payouts (mass payment instructions) ----
    async def get_payout(self, payout_id: str) -> str:
        resp = await self._get(f"/api/v4/mass_payment_instructions/{payout_id}")
        return resp.text

    def create_payout(
        self,
        mass_payment_instruction_collection_id: str,
        bank_code: str,
        bank_account_number: str,
        identity_number: str,
        name: str,
        description: str,
        total: int,
    ) -> CreatePayoutBuilder:
        return CreatePayoutBuilder(
            self,
            mass_payment_instruction_collection_id,
            bank_code,
            bank_account_number,
            identity_number,
            name,
            description,
            total,
        )

    # ---- Payout collections ----
    async def get_payout_collection(self, payout_collection_id: str) -> str:
        resp = await self._get(f"/api/v4/mass_payment_instruction_collections/{payout_collection_id}")
        return resp.text

    def create_payout_collection(self, title: str) -> CreatePayoutCollectionBuilder:
        return CreatePayoutCollectionBuilder(self, title)
