"""
LP token balance and allowance tracking.

Implements BalanceTable[Address] -> Amount and
AllowanceTable[(owner, spender)] -> Amount.
"""

from typing import Dict, Tuple

from .addresses import Address


# Type alias
Amount = int  # Unsigned 256-bit integer

MAX_UINT256: Amount = 2**256 - 1


def check_amount(amount: Amount, *, name: str = "amount") -> None:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise TypeError(f"{name} must be an int")
    if amount < 0:
        raise ValueError(f"{name} cannot be negative: {amount}")
    if amount > MAX_UINT256:
        raise ValueError(f"{name} does not fit in uint256: {amount}")


class BalanceTable:
    """
    Balance table mapping address -> amount.

    Note: balances are stored in a plain dict. Callers that need a stable
    order (serialization, hashing) sort keys explicitly.
    """

    def __init__(self):
        """Initialize empty balance table."""
        self._balances: Dict[Address, Amount] = {}

    def get(self, owner: Address) -> Amount:
        """Get balance for owner. Returns 0 if not found."""
        return self._balances.get(owner, 0)

    def set(self, owner: Address, amount: Amount) -> None:
        """
        Set balance for owner.

        Args:
            owner: Account address
            amount: Amount in [0, MAX_UINT256]

        Raises:
            ValueError: If amount is negative or exceeds uint256
        """
        check_amount(amount, name="balance")
        if amount == 0:
            # Remove zero balances to keep table sparse
            self._balances.pop(owner, None)
        else:
            self._balances[owner] = amount

    def get_all_balances(self) -> Dict[Address, Amount]:
        """Return all non-zero balances."""
        return dict(self._balances)

    def total(self) -> Amount:
        """Sum of all stored balances."""
        return sum(self._balances.values())

    def __len__(self) -> int:
        return len(self._balances)

    def __repr__(self) -> str:
        return f"BalanceTable({len(self._balances)} entries)"


class AllowanceTable:
    """
    Allowance table mapping (owner, spender) -> amount.

    Zero allowances are omitted to keep the table sparse.
    """

    def __init__(self) -> None:
        self._allowances: Dict[Tuple[Address, Address], Amount] = {}

    def get(self, owner: Address, spender: Address) -> Amount:
        """Get allowance for (owner, spender). Returns 0 if not found."""
        return self._allowances.get((owner, spender), 0)

    def set(self, owner: Address, spender: Address, amount: Amount) -> None:
        """Set allowance for (owner, spender)."""
        check_amount(amount, name="allowance")
        if amount == 0:
            self._allowances.pop((owner, spender), None)
        else:
            self._allowances[(owner, spender)] = amount

    def get_all_allowances(self) -> Dict[Tuple[Address, Address], Amount]:
        """Return all non-zero allowances."""
        return dict(self._allowances)

    def __repr__(self) -> str:
        return f"AllowanceTable({len(self._allowances)} entries)"
