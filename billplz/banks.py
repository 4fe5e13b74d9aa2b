from typing import List, Optional

from .environment import Environment
from .schemas.bank import FpxBank

# Malaysian FPX banks accepted for online payment
_PRODUCTION_BANKS = (
    ("ABMB0212", "Alliance Bank"),
    ("ABB0233", "Affin Bank"),
    ("AMBB0209", "AmBank"),
    ("BCBB0235", "CIMB Clicks"),
    ("BIMB0340", "Bank Islam"),
    ("BKRM0602", "Bank Rakyat"),
    ("BMMB0341", "Bank Muamalat"),
    ("BSN0601", "BSN"),
    ("CIT0217", "Citibank Berhad"),
    ("HLB0224", "Hong Leong Bank"),
    ("HSBC0223", "HSBC Bank"),
    ("KFH0346", "Kuwait Finance House"),
    ("MB2U0227", "Maybank2u"),
    ("MBB0227", "Maybank2E"),
    ("MBB0228", "Maybank2E"),
    ("OCBC0229", "OCBC Bank"),
    ("PBB0233", "Public Bank"),
    ("RHB0218", "RHB Now"),
    ("SCB0216", "Standard Chartered"),
    ("UOB0226", "UOB Bank"),
)

# sandbox only
_STAGING_TEST_BANKS = (
    ("TEST0001", "Test 0001"),
    ("TEST0002", "Test 0002"),
    ("TEST0003", "Test 0003"),
    ("TEST0004", "Test 0004"),
    ("TEST0021", "Test 0021"),
    ("TEST0022", "Test 0022"),
    ("TEST0023", "Test 0023"),
)


def fpx_banks(environment: Optional[Environment] = None) -> List[FpxBank]:
    """
    Build the FPX bank list. Staging gets the test banks appended after
    the real ones; production and custom hosts get the real ones only.
    """
    rows = list(_PRODUCTION_BANKS)
    if environment is Environment.STAGING:
        rows.extend(_STAGING_TEST_BANKS)
    return [FpxBank(bank_code=code, bank_name=name) for code, name in rows]
