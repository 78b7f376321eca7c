"""
Pair contract logic
"""

from .engine import call, call_or_raise
from .erc20 import TokenLedger
from .errors import (
    AlreadyInitializedError,
    InsufficientAllowanceError,
    InsufficientBalanceError,
    InvalidRecipientError,
    LedgerError,
    LedgerInvalidRecipientError,
    LedgerOverflowError,
    NotInitializedError,
    PairError,
)
from .pair import MINIMUM_MINT_AMOUNT, Pair, PairStorage, initialize, mint
from .snapshot import compute_state_root, pair_from_dict, pair_to_dict
from .types import CallResult, Event, LedgerEvent, Method, PairCall

__all__ = [
    "call",
    "call_or_raise",
    "TokenLedger",
    "AlreadyInitializedError",
    "InsufficientAllowanceError",
    "InsufficientBalanceError",
    "InvalidRecipientError",
    "LedgerError",
    "LedgerInvalidRecipientError",
    "LedgerOverflowError",
    "NotInitializedError",
    "PairError",
    "MINIMUM_MINT_AMOUNT",
    "Pair",
    "PairStorage",
    "initialize",
    "mint",
    "compute_state_root",
    "pair_from_dict",
    "pair_to_dict",
    "CallResult",
    "Event",
    "LedgerEvent",
    "Method",
    "PairCall",
]
