from .builders import (
    CreateBankVerificationBuilder,
    CreateBillBuilder,
    CreateCollectionBuilder,
    CreatePayoutBuilder,
    CreatePayoutCollectionBuilder,
)
from .client import BillplzClient
from .environment import Environment
from .errors import ApiError, BillplzError, BuilderConsumedError, ConfigError, ParseError, TransportError

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "BillplzClient",
    "BillplzError",
    "BuilderConsumedError",
    "ConfigError",
    "CreateBankVerificationBuilder",
    "CreateBillBuilder",
    "CreateCollectionBuilder",
    "CreatePayoutBuilder",
    "CreatePayoutCollectionBuilder",
    "Environment",
    "ParseError",
    "TransportError",
]
