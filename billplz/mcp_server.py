"""
MCP (Model Context Protocol) server for the Billplz API.

Exposes the client operations as tools so any MCP client can manage
collections, bills, payouts and bank verifications. Started by:

  billplz mcp

Typed results come back as pretty JSON, passthrough endpoints as the raw
response body, failures as "Error: <message>".
"""
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from .client import BillplzClient
from .errors import BillplzError
from .utils.render import output_json

INSTRUCTIONS = (
    "Billplz payment gateway MCP server. Manage collections, bills, payouts, and bank verifications."
)


def _dump(value: Any) -> str:
    return output_json(value, pretty=True)


class BillplzTools:
    """Tool implementations registered by build_server()."""

    def __init__(self, client: BillplzClient):
        self.client = client

    # ---- Collections ----
    async def get_collection(self, id: str) -> str:
        """Get a Billplz collection by ID"""
        try:
            return _dump(await self.client.get_collection(id))
        except BillplzError as e:
            return f"Error: {e}"

    async def create_collection(self, title: str, split_header: Optional[bool] = None) -> str:
        """Create a new Billplz collection"""
        builder = self.client.create_collection(title)
        if split_header is not None:
            builder = builder.split_header(split_header)
        try:
            return _dump(await builder.send())
        except BillplzError as e:
            return f"Error: {e}"

    # ---- Bills ----
    async def get_bill(self, id: str) -> str:
        """Get a Billplz bill by ID"""
        try:
            return _dump(await self.client.get_bill(id))
        except BillplzError as e:
            return f"Error: {e}"

    async def create_bill(
        self,
        collection_id: str,
        email: str,
        name: str,
        amount: int,
        callback_url: str,
        description: str,
        due_at: str,
        mobile: Optional[str] = None,
        redirect_url: Optional[str] = None,
        deliver: Optional[bool] = None,
        reference_1_label: Optional[str] = None,
        reference_1: Optional[str] = None,
        reference_2_label: Optional[str] = None,
        reference_2: Optional[str] = None,
    ) -> str:
        """Create a new Billplz bill for payment collection. Amount is in cents (e.g. 10000 = RM 100.00). due_at is YYYY-MM-DD."""
        builder = self.client.create_bill(collection_id, email, name, amount, callback_url, description, due_at)
        optional = {
            "mobile": mobile,
            "redirect_url": redirect_url,
            "deliver": deliver,
            "reference_1_label": reference_1_label,
            "reference_1": reference_1,
            "reference_2_label": reference_2_label,
            "reference_2": reference_2,
        }
        for field, value in optional.items():
            if value is not None:
                builder = getattr(builder, field)(value)
        try:
            return _dump(await builder.send())
        except BillplzError as e:
            return f"Error: {e}"

    # ---- Banks ----
    async def get_fpx_banks(self) -> str:
        """List all Malaysian FPX banks available for online payment"""
        return _dump(self.client.get_fpx_banks())

    async def get_bank_verification(self, account_number: str) -> str:
        """Get bank account verification status by account number"""
        try:
            return await self.client.get_bank_verification(account_number)
        except BillplzError as e:
            return f"Error: {e}"

    async def create_bank_verification(
        self, name: str, id_no: str, acc_no: str, code: str, organization: bool = False
    ) -> str:
        """Create a bank account verification for payout eligibility. id_no is the IC/passport number, code the bank SWIFT code."""
        try:
            return await self.client.create_bank_verification(name, id_no, acc_no, code).organization(organization).send()
        except BillplzError as e:
            return f"Error: {e}"

    # ---- Payouts ----
    async def get_payout(self, id: str) -> str:
        """Get a mass payment instruction (payout) by ID"""
        try:
            return await self.client.get_payout(id)
        except BillplzError as e:
            return f"Error: {e}"

    async def create_payout(
        self,
        collection_id: str,
        bank_code: str,
        acc_no: str,
        id_no: str,
        name: str,
        description: str,
        total: int,
    ) -> str:
        """Create a mass payment instruction (payout). Total is in cents."""
        try:
            return await self.client.create_payout(
                collection_id, bank_code, acc_no, id_no, name, description, total
            ).send()
        except BillplzError as e:
            return f"Error: {e}"

    async def get_payout_collection(self, id: str) -> str:
        """Get a payout collection by ID"""
        try:
            return await self.client.get_payout_collection(id)
        except BillplzError as e:
            return f"Error: {e}"

    async def create_payout_collection(self, title: str) -> str:
        """Create a new payout collection"""
        try:
            return await self.client.create_payout_collection(title).send()
        except BillplzError as e:
            return f"Error: {e}"


TOOL_NAMES = (
    "get_collection",
    "create_collection",
    "get_bill",
    "create_bill",
    "get_fpx_banks",
    "get_bank_verification",
    "create_bank_verification",
    "get_payout",
    "create_payout",
    "get_payout_collection",
    "create_payout_collection",
)


def build_server(client: BillplzClient) -> FastMCP:
    mcp = FastMCP("billplz", instructions=INSTRUCTIONS)
    tools = BillplzTools(client)
    for name in TOOL_NAMES:
        mcp.add_tool(getattr(tools, name))
    return mcp


def run_stdio(client: BillplzClient) -> None:
    build_server(client).run(transport="stdio")
