"""Dispatch-table entry point for pair calls.

``call(pair, params)`` is the result-returning surface. It:

1. Looks up the handler for ``params.method``.
2. Runs it against the pair (handlers validate before mutating).
3. Converts a rejected call (``PairError``) into ``CallResult(ok=False)``
   carrying the error's stable ``code``.

``call_or_raise`` is the same, but lets the ``PairError`` propagate.
Malformed inputs (``TypeError`` / ``ValueError``) always propagate.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .errors import PairError
from .pair import Pair
from .types import CallResult, Method, PairCall

logger = logging.getLogger(__name__)

HandlerFn = Callable[[Pair, PairCall], Any]

_DISPATCH: dict[Method, HandlerFn] = {
    Method.INITIALIZE: lambda p, c: p.initialize(c.token0, c.token1, c.fee_to),
    Method.MINT: lambda p, c: p.mint(c.to),
    Method.TOKEN0: lambda p, c: p.token0(),
    Method.TOKEN1: lambda p, c: p.token1(),
    Method.FEE_TO: lambda p, c: p.fee_to(),
    Method.NAME: lambda p, c: p.name(),
    Method.SYMBOL: lambda p, c: p.symbol(),
    Method.DECIMALS: lambda p, c: p.decimals(),
    Method.TOTAL_SUPPLY: lambda p, c: p.total_supply(),
    Method.BALANCE_OF: lambda p, c: p.balance_of(c.owner),
    Method.ALLOWANCE: lambda p, c: p.allowance(c.owner, c.spender),
    Method.TRANSFER: lambda p, c: p.transfer(c.sender, c.to, c.amount),
    Method.APPROVE: lambda p, c: p.approve(c.sender, c.spender, c.amount),
    Method.TRANSFER_FROM: lambda p, c: p.transfer_from(c.sender, c.owner, c.to, c.amount),
}


def call_or_raise(pair: Pair, params: PairCall) -> CallResult:
    """Execute one call; raises ``PairError`` on rejection."""
    handler = _DISPATCH.get(params.method)
    if handler is None:
        raise PairError(f"unknown method: {params.method!r}")
    return CallResult(ok=True, value=handler(pair, params))


def call(pair: Pair, params: PairCall) -> CallResult:
    """Execute one call against the pair.

    Returns ``CallResult`` with ``ok=True`` and the handler's return value,
    or ``ok=False`` with the error message and code.
    """
    if params.method not in _DISPATCH:
        return CallResult(ok=False, error=f"unknown method: {params.method!r}", code="unknown_method")
    try:
        return call_or_raise(pair, params)
    except PairError as exc:
        logger.info("call %s rejected: %s (%s)", params.method.value, exc, exc.code)
        return CallResult(ok=False, error=str(exc), code=exc.code)
