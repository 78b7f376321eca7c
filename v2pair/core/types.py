"""Data types shared by the pair, the LP token ledger and the call engine.

All types are frozen dataclasses (immutable).

Conventions:
- addresses are canonical 0x-prefixed lowercase hex strings,
- amounts are unsigned 256-bit integers,
- unused call fields default to the zero address / 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Any

from ..state.addresses import ZERO_ADDRESS, Address


@unique
class Event(Enum):
    """Ledger event kinds (ERC-20 log topics)."""
    TRANSFER = "Transfer"
    APPROVAL = "Approval"


@dataclass(frozen=True)
class LedgerEvent:
    """One emitted ledger log entry.

    For ``TRANSFER`` the parties are (sender, recipient); for ``APPROVAL``
    they are (owner, spender).
    """

    event: Event
    src: Address
    dst: Address
    value: int


@unique
class Method(Enum):
    """One member per public entry point of the pair."""
    INITIALIZE = "initialize"
    MINT = "mint"
    TOKEN0 = "token0"
    TOKEN1 = "token1"
    FEE_TO = "fee_to"
    NAME = "name"
    SYMBOL = "symbol"
    DECIMALS = "decimals"
    TOTAL_SUPPLY = "total_supply"
    BALANCE_OF = "balance_of"
    ALLOWANCE = "allowance"
    TRANSFER = "transfer"
    APPROVE = "approve"
    TRANSFER_FROM = "transfer_from"


@dataclass(frozen=True)
class PairCall:
    """Parameters for a call. Unused fields default to zero."""

    method: Method
    sender: Address = ZERO_ADDRESS   # msg.sender for transfer / approve / transfer_from
    token0: Address = ZERO_ADDRESS   # initialize
    token1: Address = ZERO_ADDRESS   # initialize
    fee_to: Address = ZERO_ADDRESS   # initialize
    to: Address = ZERO_ADDRESS       # mint / transfer / transfer_from
    owner: Address = ZERO_ADDRESS    # balance_of / allowance / transfer_from
    spender: Address = ZERO_ADDRESS  # allowance / approve
    amount: int = 0                  # transfer / approve / transfer_from


@dataclass(frozen=True)
class CallResult:
    """Result of a single call."""

    ok: bool
    value: Any = None
    error: str | None = None
    code: str | None = None
