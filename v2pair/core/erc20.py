"""
Embedded LP token ledger (ERC-20 semantics).

The ledger is owned by a pair and never shared. Every mutating call checks
all of its preconditions before touching state, so a rejected call leaves
balances, allowances, supply and the event log unchanged.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from ..config import LedgerParams
from ..state.addresses import ZERO_ADDRESS, Address, canonical_address, is_zero_address
from ..state.balances import MAX_UINT256, AllowanceTable, Amount, BalanceTable, check_amount
from .errors import (
    InsufficientAllowanceError,
    InsufficientBalanceError,
    LedgerInvalidRecipientError,
    LedgerOverflowError,
)
from .types import Event, LedgerEvent

logger = logging.getLogger(__name__)


class TokenLedger:
    """
    Fungible-token ledger: balances, allowances, total supply and event log.

    Addresses passed in are canonicalized; amounts must be ints in
    [0, MAX_UINT256] (``TypeError`` / ``ValueError`` otherwise).
    """

    def __init__(self, params: Optional[LedgerParams] = None) -> None:
        self.params = params or LedgerParams()
        self._total_supply: Amount = 0
        self._balances = BalanceTable()
        self._allowances = AllowanceTable()
        self._events: List[LedgerEvent] = []

    @classmethod
    def restore(
        cls,
        params: LedgerParams,
        *,
        total_supply: Amount,
        balances: Mapping[Address, Amount],
        allowances: Mapping[Tuple[Address, Address], Amount],
    ) -> "TokenLedger":
        """
        Rebuild a ledger from stored tables (event log starts empty).

        Raises:
            ValueError: If balances do not sum to total_supply
        """
        check_amount(total_supply, name="total_supply")
        ledger = cls(params)
        for owner, amount in balances.items():
            ledger._balances.set(canonical_address(owner, name="owner"), amount)
        for (owner, spender), amount in allowances.items():
            ledger._allowances.set(
                canonical_address(owner, name="owner"),
                canonical_address(spender, name="spender"),
                amount,
            )
        if ledger._balances.total() != total_supply:
            raise ValueError(
                f"balances sum to {ledger._balances.total()}, expected total_supply {total_supply}"
            )
        ledger._total_supply = total_supply
        return ledger

    # -- metadata ---------------------------------------------------------

    @property
    def name(self) -> str:
        return self.params.name

    @property
    def symbol(self) -> str:
        return self.params.symbol

    @property
    def decimals(self) -> int:
        return self.params.decimals

    # -- queries ----------------------------------------------------------

    @property
    def total_supply(self) -> Amount:
        return self._total_supply

    def balance_of(self, owner: Address) -> Amount:
        """Balance of owner. Returns 0 for unknown accounts."""
        return self._balances.get(canonical_address(owner, name="owner"))

    def allowance(self, owner: Address, spender: Address) -> Amount:
        return self._allowances.get(
            canonical_address(owner, name="owner"),
            canonical_address(spender, name="spender"),
        )

    @property
    def events(self) -> List[LedgerEvent]:
        """Emitted events, oldest first (copy)."""
        return list(self._events)

    def get_all_balances(self) -> Dict[Address, Amount]:
        return self._balances.get_all_balances()

    def get_all_allowances(self) -> Dict[Tuple[Address, Address], Amount]:
        return self._allowances.get_all_allowances()

    # -- mutations --------------------------------------------------------

    def mint(self, to: Address, amount: Amount) -> None:
        """
        Create ``amount`` new tokens credited to ``to``.

        Raises:
            LedgerInvalidRecipientError: If to is the zero address
            LedgerOverflowError: If total supply would exceed uint256
        """
        to = canonical_address(to, name="to")
        check_amount(amount)
        if is_zero_address(to):
            raise LedgerInvalidRecipientError("mint to the zero address")

        new_supply = self._total_supply + amount
        if new_supply > MAX_UINT256:
            raise LedgerOverflowError(
                f"total supply overflow: {self._total_supply} + {amount}"
            )
        # A balance never exceeds total supply, so the credit cannot overflow.
        new_balance = self._balances.get(to) + amount

        self._total_supply = new_supply
        self._balances.set(to, new_balance)
        self._events.append(LedgerEvent(Event.TRANSFER, ZERO_ADDRESS, to, amount))
        logger.debug("minted %d to %s (supply=%d)", amount, to, new_supply)

    def transfer(self, sender: Address, to: Address, amount: Amount) -> bool:
        """Move ``amount`` from sender to ``to``."""
        sender = canonical_address(sender, name="sender")
        to = canonical_address(to, name="to")
        check_amount(amount)
        self._transfer(sender, to, amount)
        return True

    def approve(self, owner: Address, spender: Address, amount: Amount) -> bool:
        """Set the allowance of ``spender`` over ``owner``'s tokens."""
        owner = canonical_address(owner, name="owner")
        spender = canonical_address(spender, name="spender")
        check_amount(amount)
        self._allowances.set(owner, spender, amount)
        self._events.append(LedgerEvent(Event.APPROVAL, owner, spender, amount))
        return True

    def transfer_from(self, spender: Address, owner: Address, to: Address, amount: Amount) -> bool:
        """
        Move ``amount`` from owner to ``to`` using spender's allowance.

        An allowance of MAX_UINT256 is treated as infinite and is not decremented.
        """
        spender = canonical_address(spender, name="spender")
        owner = canonical_address(owner, name="owner")
        to = canonical_address(to, name="to")
        check_amount(amount)

        current = self._allowances.get(owner, spender)
        if current < amount:
            raise InsufficientAllowanceError(owner, spender, current, amount)
        balance = self._balances.get(owner)
        if balance < amount:
            raise InsufficientBalanceError(owner, balance, amount)

        if current != MAX_UINT256:
            self._allowances.set(owner, spender, current - amount)
        self._transfer(owner, to, amount)
        return True

    def _transfer(self, src: Address, dst: Address, amount: Amount) -> None:
        balance = self._balances.get(src)
        if balance < amount:
            raise InsufficientBalanceError(src, balance, amount)
        # Balances never exceed total supply, so the credit cannot overflow.
        if src != dst:
            self._balances.set(src, balance - amount)
            self._balances.set(dst, self._balances.get(dst) + amount)
        self._events.append(LedgerEvent(Event.TRANSFER, src, dst, amount))

    def __repr__(self) -> str:
        return (
            f"TokenLedger(symbol={self.symbol}, total_supply={self._total_supply}, "
            f"holders={len(self._balances)})"
        )
