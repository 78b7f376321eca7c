"""
v2pair: a two-asset liquidity-pool pair with an embedded LP token ledger.
"""

from .core.pair import MINIMUM_MINT_AMOUNT, Pair, PairStorage
from .state.addresses import ZERO_ADDRESS, Address

__all__ = [
    "MINIMUM_MINT_AMOUNT",
    "Pair",
    "PairStorage",
    "ZERO_ADDRESS",
    "Address",
]
