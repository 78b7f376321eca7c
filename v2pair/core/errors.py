"""Exception types for the pair contract and its embedded LP token ledger.

Every error carries a stable ``code`` string. ``call()`` in ``engine.py``
copies it into ``CallResult.code`` for callers that prefer inspecting
results over catching exceptions.
"""

from __future__ import annotations


class PairError(Exception):
    """Base class for all rejected pair / ledger operations."""

    code = "pair_error"


class AlreadyInitializedError(PairError):
    """Raised when ``initialize`` is called on a pair whose token0 is already bound."""

    code = "already_initialized"

    def __init__(self, message: str = "Already initialized") -> None:
        super().__init__(message)


class NotInitializedError(PairError):
    """Raised when ``mint`` is called before both assets are bound."""

    code = "not_initialized"

    def __init__(self, message: str = "Pool not initialized") -> None:
        super().__init__(message)


class InvalidRecipientError(PairError):
    """Raised when ``mint`` targets the zero address."""

    code = "invalid_recipient"

    def __init__(self, message: str = "Cannot mint to the zero address") -> None:
        super().__init__(message)


class LedgerError(PairError):
    """Base class for errors raised by the embedded token ledger."""

    code = "ledger_error"


class LedgerOverflowError(LedgerError):
    code = "overflow"


class LedgerInvalidRecipientError(LedgerError):
    code = "ledger_invalid_recipient"


class InsufficientBalanceError(LedgerError):
    code = "insufficient_balance"

    def __init__(self, owner: str, balance: int, needed: int) -> None:
        self.owner = owner
        self.balance = balance
        self.needed = needed
        super().__init__(f"insufficient balance for {owner}: {balance} < {needed}")


class InsufficientAllowanceError(LedgerError):
    code = "insufficient_allowance"

    def __init__(self, owner: str, spender: str, allowance: int, needed: int) -> None:
        self.owner = owner
        self.spender = spender
        self.allowance = allowance
        self.needed = needed
        super().__init__(
            f"insufficient allowance for {spender} on {owner}: {allowance} < {needed}"
        )
