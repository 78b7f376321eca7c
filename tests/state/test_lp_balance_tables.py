from __future__ import annotations

import pytest

from v2pair.state.addresses import address_from_int
from v2pair.state.balances import MAX_UINT256, AllowanceTable, BalanceTable

ALICE = address_from_int(0xA11CE)
BOB = address_from_int(0xB0B)


def test_balance_table_defaults_to_zero_and_stays_sparse() -> None:
    table = BalanceTable()
    assert table.get(ALICE) == 0

    table.set(ALICE, 5)
    table.set(BOB, 7)
    assert table.get(ALICE) == 5
    assert table.total() == 12
    assert len(table) == 2

    table.set(ALICE, 0)
    assert table.get_all_balances() == {BOB: 7}


def test_balance_table_rejects_out_of_range() -> None:
    table = BalanceTable()
    with pytest.raises(ValueError):
        table.set(ALICE, -1)
    with pytest.raises(ValueError):
        table.set(ALICE, MAX_UINT256 + 1)
    with pytest.raises(TypeError):
        table.set(ALICE, True)  # type: ignore[arg-type]
    table.set(ALICE, MAX_UINT256)
    assert table.get(ALICE) == MAX_UINT256


def test_allowance_table_is_directional() -> None:
    table = AllowanceTable()
    table.set(ALICE, BOB, 10)
    assert table.get(ALICE, BOB) == 10
    assert table.get(BOB, ALICE) == 0

    table.set(ALICE, BOB, 0)
    assert table.get_all_allowances() == {}
