from .bank import Bank, FpxBank
from .bill import Bill, BillResponse
from .collection import Collection, CollectionResponse, Logo, SplitPayment, SplitPaymentResponse
from .error import ErrorDetail, ErrorEnvelope
from .payout import Payout, PayoutCollection

__all__ = [
    "Bank",
    "Bill",
    "BillResponse",
    "Collection",
    "CollectionResponse",
    "ErrorDetail",
    "ErrorEnvelope",
    "FpxBank",
    "Logo",
    "Payout",
    "PayoutCollection",
    "SplitPayment",
    "SplitPaymentResponse",
]
