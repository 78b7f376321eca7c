"""Tests for v2pair/core/pair.py: initialization, minting and the Pair facade.

Covers the lifecycle end-to-end: fresh deployment, one-time initialize,
guarded mint, and forwarding of LP token operations.
"""

import logging

import pytest

from v2pair.config import LedgerParams
from v2pair.core import pair as pair_mod
from v2pair.core.erc20 import TokenLedger
from v2pair.core.errors import (
    AlreadyInitializedError,
    InvalidRecipientError,
    LedgerOverflowError,
    NotInitializedError,
    PairError,
)
from v2pair.core.pair import MINIMUM_MINT_AMOUNT, Pair, PairStorage
from v2pair.core.types import Event, LedgerEvent
from v2pair.state.addresses import ZERO_ADDRESS, address_from_int
from v2pair.state.balances import MAX_UINT256

TOKEN_A = address_from_int(0xA)
TOKEN_B = address_from_int(0xB)
FEE_C = address_from_int(0xC)
TOKEN_D = address_from_int(0xD)
TOKEN_E = address_from_int(0xE)
FEE_F = address_from_int(0xF)
ALICE = address_from_int(0xA11CE)
BOB = address_from_int(0xB0B)


def _initialized_pair() -> Pair:
    p = Pair()
    p.initialize(TOKEN_A, TOKEN_B, FEE_C)
    return p


# ---------------------------------------------------------------------------
# deployment defaults
# ---------------------------------------------------------------------------

class TestFreshPair:
    def test_accessors_return_zero_sentinel(self):
        p = Pair()
        assert p.token0() == ZERO_ADDRESS
        assert p.token1() == ZERO_ADDRESS
        assert p.fee_to() == ZERO_ADDRESS
        assert p.total_supply() == 0
        assert not p.storage.is_initialized()

    def test_mint_before_initialize_fails(self):
        p = Pair()
        with pytest.raises(NotInitializedError, match="Pool not initialized"):
            p.mint(ALICE)
        assert p.total_supply() == 0

    def test_zero_recipient_checked_before_initialization(self):
        p = Pair()
        with pytest.raises(InvalidRecipientError):
            p.mint(ZERO_ADDRESS)

    def test_ledger_params_flow_to_token(self):
        p = Pair(LedgerParams(name="Pool LP", symbol="PLP", decimals=8))
        assert (p.name(), p.symbol(), p.decimals()) == ("Pool LP", "PLP", 8)

    def test_params_and_storage_are_exclusive(self):
        with pytest.raises(ValueError):
            Pair(LedgerParams(), storage=PairStorage())


# ---------------------------------------------------------------------------
# initialize
# ---------------------------------------------------------------------------

class TestInitialize:
    def test_binds_all_three(self):
        p = _initialized_pair()
        assert p.token0() == TOKEN_A
        assert p.token1() == TOKEN_B
        assert p.fee_to() == FEE_C
        assert p.storage.is_initialized()

    def test_second_call_fails_and_keeps_first_values(self):
        p = _initialized_pair()
        with pytest.raises(AlreadyInitializedError, match="Already initialized"):
            p.initialize(TOKEN_D, TOKEN_E, FEE_F)
        assert (p.token0(), p.token1(), p.fee_to()) == (TOKEN_A, TOKEN_B, FEE_C)

    def test_identical_repeat_still_fails(self):
        p = _initialized_pair()
        with pytest.raises(AlreadyInitializedError):
            p.initialize(TOKEN_A, TOKEN_B, FEE_C)

    def test_inputs_are_canonicalized(self):
        p = Pair()
        p.initialize(TOKEN_A.upper().replace("0X", "0x"), TOKEN_B[2:], FEE_C)
        assert p.token0() == TOKEN_A
        assert p.token1() == TOKEN_B

    def test_malformed_input_leaves_pair_unset(self):
        p = Pair()
        with pytest.raises(ValueError):
            p.initialize(TOKEN_A, "0x1234", FEE_C)
        assert p.token0() == ZERO_ADDRESS

    def test_permissive_inputs(self):
        # Same asset twice, zero token1 and zero fee recipient are all accepted.
        p = Pair()
        p.initialize(TOKEN_A, TOKEN_A, ZERO_ADDRESS)
        assert p.token1() == TOKEN_A
        assert p.fee_to() == ZERO_ADDRESS

        q = Pair()
        q.initialize(TOKEN_A, ZERO_ADDRESS, FEE_C)
        assert q.token1() == ZERO_ADDRESS
        with pytest.raises(NotInitializedError):
            q.mint(ALICE)
        with pytest.raises(AlreadyInitializedError):
            q.initialize(TOKEN_D, TOKEN_E, FEE_F)

    def test_zero_token0_allows_reinitialization(self):
        # Only a bound token0 gates initialize.
        p = Pair()
        p.initialize(ZERO_ADDRESS, TOKEN_B, FEE_C)
        p.initialize(TOKEN_D, TOKEN_E, FEE_F)
        assert (p.token0(), p.token1(), p.fee_to()) == (TOKEN_D, TOKEN_E, FEE_F)


# ---------------------------------------------------------------------------
# mint
# ---------------------------------------------------------------------------

class TestMint:
    def test_returns_fixed_amount_and_credits(self):
        p = _initialized_pair()
        assert p.mint(ALICE) == MINIMUM_MINT_AMOUNT == 1000
        assert p.balance_of(ALICE) == 1000
        assert p.total_supply() == 1000
        assert p.events() == [LedgerEvent(Event.TRANSFER, ZERO_ADDRESS, ALICE, 1000)]

    def test_repeated_mints_accumulate(self):
        p = _initialized_pair()
        p.mint(ALICE)
        p.mint(BOB)
        p.mint(ALICE)
        assert p.balance_of(ALICE) == 2000
        assert p.balance_of(BOB) == 1000
        assert p.total_supply() == 3000

    def test_zero_recipient_rejected(self):
        p = _initialized_pair()
        with pytest.raises(InvalidRecipientError, match="zero address"):
            p.mint(ZERO_ADDRESS)
        assert p.total_supply() == 0
        assert p.events() == []

    def test_unprefixed_zero_recipient_rejected(self):
        p = _initialized_pair()
        with pytest.raises(InvalidRecipientError):
            p.mint("0" * 40)
        assert p.total_supply() == 0

    def test_mint_does_not_touch_metadata(self):
        p = _initialized_pair()
        p.mint(ALICE)
        assert (p.token0(), p.token1(), p.fee_to()) == (TOKEN_A, TOKEN_B, FEE_C)

    def test_ledger_overflow_propagates(self):
        ledger = TokenLedger()
        ledger.mint(BOB, MAX_UINT256 - 999)
        storage = PairStorage(token0=TOKEN_A, token1=TOKEN_B, fee_to=FEE_C, token=ledger)
        p = Pair(storage=storage)

        with pytest.raises(LedgerOverflowError):
            p.mint(ALICE)
        assert p.balance_of(ALICE) == 0
        assert p.total_supply() == MAX_UINT256 - 999

    def test_module_handlers_operate_on_storage(self):
        storage = PairStorage()
        pair_mod.initialize(storage, TOKEN_A, TOKEN_B, FEE_C)
        assert pair_mod.mint(storage, ALICE) == MINIMUM_MINT_AMOUNT
        assert pair_mod.token0(storage) == TOKEN_A
        assert pair_mod.token1(storage) == TOKEN_B
        assert pair_mod.fee_to(storage) == FEE_C
        assert storage.token.balance_of(ALICE) == MINIMUM_MINT_AMOUNT

    def test_errors_share_base_class(self):
        p = Pair()
        with pytest.raises(PairError) as info:
            p.mint(ALICE)
        assert info.value.code == "not_initialized"

    def test_debug_logging(self, caplog):
        p = _initialized_pair()
        with caplog.at_level(logging.DEBUG, logger="v2pair.core.pair"):
            p.mint(ALICE)
        assert any("minted 1000" in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# forwarded LP token operations
# ---------------------------------------------------------------------------

class TestForwardedLedger:
    def test_transfer_and_allowance(self):
        p = _initialized_pair()
        p.mint(ALICE)
        assert p.transfer(ALICE, BOB, 100) is True
        assert p.approve(BOB, ALICE, 50) is True
        assert p.allowance(BOB, ALICE) == 50
        assert p.transfer_from(ALICE, BOB, ALICE, 50) is True
        assert p.balance_of(ALICE) == 950
        assert p.balance_of(BOB) == 50
        assert p.allowance(BOB, ALICE) == 0
        assert p.total_supply() == 1000


# ---------------------------------------------------------------------------
# full scenario
# ---------------------------------------------------------------------------

def test_deploy_initialize_mint_reinitialize_scenario():
    p = Pair()
    assert p.token0() == ZERO_ADDRESS

    p.initialize(TOKEN_A, TOKEN_B, FEE_C)
    assert p.token0() == TOKEN_A
    assert p.token1() == TOKEN_B

    assert p.mint(TOKEN_A) == 1000
    assert p.balance_of(TOKEN_A) == 1000

    with pytest.raises(AlreadyInitializedError):
        p.initialize(TOKEN_D, TOKEN_E, FEE_F)
    assert p.token0() == TOKEN_A
