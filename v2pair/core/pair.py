"""
Liquidity pool pair: one-time initialization and fixed-amount LP minting.

State lives in a single ``PairStorage`` created at deployment and passed by
reference to every handler below. The LP token ledger is owned by that
storage; ``Pair`` re-exposes the ledger's operations next to the pool ones.

Guards (fail-closed, evaluated before any mutation):
- ``initialize`` rejects once ``token0`` is bound.
- ``mint`` rejects the zero recipient first, then an uninitialized pool.

No reserve accounting is done here: ``mint`` issues ``MINIMUM_MINT_AMOUNT``
regardless of deposits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import LedgerParams
from ..state.addresses import ZERO_ADDRESS, Address, canonical_address, is_zero_address
from ..state.balances import Amount
from .erc20 import TokenLedger
from .errors import AlreadyInitializedError, InvalidRecipientError, NotInitializedError
from .types import LedgerEvent

logger = logging.getLogger(__name__)

# LP tokens issued per mint call.
MINIMUM_MINT_AMOUNT: Amount = 1000


@dataclass
class PairStorage:
    """
    Mutable pair state: pool metadata plus the owned LP token ledger.

    A fresh instance has every address at the zero sentinel and an empty ledger.
    """

    token0: Address = ZERO_ADDRESS
    token1: Address = ZERO_ADDRESS
    fee_to: Address = ZERO_ADDRESS
    token: TokenLedger = field(default_factory=TokenLedger)

    def is_initialized(self) -> bool:
        return self.token0 != ZERO_ADDRESS and self.token1 != ZERO_ADDRESS


def initialize(storage: PairStorage, token0: Address, token1: Address, fee_to: Address) -> None:
    """
    Bind the pair to its two assets and fee recipient. Allowed once.

    Only the stored token0 gates re-initialization; the inputs themselves are
    not checked against the zero address or against each other.

    Raises:
        AlreadyInitializedError: If token0 is already bound
        ValueError: If an input is not a well-formed address
    """
    t0 = canonical_address(token0, name="token0")
    t1 = canonical_address(token1, name="token1")
    fee = canonical_address(fee_to, name="fee_to")

    if storage.token0 != ZERO_ADDRESS:
        raise AlreadyInitializedError()

    storage.token0 = t0
    storage.token1 = t1
    storage.fee_to = fee
    logger.debug("pair initialized token0=%s token1=%s fee_to=%s", t0, t1, fee)


def mint(storage: PairStorage, to: Address) -> Amount:
    """
    Issue MINIMUM_MINT_AMOUNT LP tokens to ``to`` and return the amount.

    Raises:
        InvalidRecipientError: If to is the zero address
        NotInitializedError: If token0 or token1 is unbound
        LedgerError: Propagated unchanged from the ledger (e.g. overflow)
    """
    to = canonical_address(to, name="to")
    if is_zero_address(to):
        raise InvalidRecipientError()
    if is_zero_address(storage.token0) or is_zero_address(storage.token1):
        raise NotInitializedError()

    amount = MINIMUM_MINT_AMOUNT
    storage.token.mint(to, amount)
    logger.debug("pair minted %d LP to %s", amount, to)
    return amount


def token0(storage: PairStorage) -> Address:
    return storage.token0


def token1(storage: PairStorage) -> Address:
    return storage.token1


def fee_to(storage: PairStorage) -> Address:
    return storage.fee_to


class Pair:
    """
    Public surface of a deployed pair.

    Pool operations run the handlers above against the owned storage; token
    operations are forwarded to the embedded ledger, so a Pair can be used
    wherever an LP token is expected.
    """

    def __init__(
        self,
        params: Optional[LedgerParams] = None,
        *,
        storage: Optional[PairStorage] = None,
    ) -> None:
        if storage is not None and params is not None:
            raise ValueError("pass either params or storage, not both")
        self._storage = storage if storage is not None else PairStorage(token=TokenLedger(params))

    @property
    def storage(self) -> PairStorage:
        return self._storage

    # -- pool -------------------------------------------------------------

    def initialize(self, token0: Address, token1: Address, fee_to: Address) -> None:
        initialize(self._storage, token0, token1, fee_to)

    def mint(self, to: Address) -> Amount:
        return mint(self._storage, to)

    def token0(self) -> Address:
        return token0(self._storage)

    def token1(self) -> Address:
        return token1(self._storage)

    def fee_to(self) -> Address:
        return fee_to(self._storage)

    # -- LP token (forwarded) ---------------------------------------------

    def name(self) -> str:
        return self._storage.token.name

    def symbol(self) -> str:
        return self._storage.token.symbol

    def decimals(self) -> int:
        return self._storage.token.decimals

    def total_supply(self) -> Amount:
        return self._storage.token.total_supply

    def balance_of(self, owner: Address) -> Amount:
        return self._storage.token.balance_of(owner)

    def allowance(self, owner: Address, spender: Address) -> Amount:
        return self._storage.token.allowance(owner, spender)

    def transfer(self, sender: Address, to: Address, amount: Amount) -> bool:
        return self._storage.token.transfer(sender, to, amount)

    def approve(self, sender: Address, spender: Address, amount: Amount) -> bool:
        return self._storage.token.approve(sender, spender, amount)

    def transfer_from(self, sender: Address, owner: Address, to: Address, amount: Amount) -> bool:
        return self._storage.token.transfer_from(sender, owner, to, amount)

    def events(self) -> List[LedgerEvent]:
        return self._storage.token.events

    def __repr__(self) -> str:
        s = self._storage
        return (
            f"Pair(token0={s.token0[:10]}..., token1={s.token1[:10]}..., "
            f"lp_supply={s.token.total_supply})"
        )
