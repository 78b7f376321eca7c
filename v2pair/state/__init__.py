"""
State primitives for the pair contract
"""

from .addresses import ZERO_ADDRESS, Address, canonical_address, is_zero_address
from .balances import MAX_UINT256, AllowanceTable, Amount, BalanceTable

__all__ = [
    "ZERO_ADDRESS",
    "Address",
    "canonical_address",
    "is_zero_address",
    "MAX_UINT256",
    "AllowanceTable",
    "Amount",
    "BalanceTable",
]
