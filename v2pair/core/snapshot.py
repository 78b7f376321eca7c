"""
Pair state snapshots (v1).

JSON-friendly dict form of a ``PairStorage`` plus a deterministic state root.
Amounts are encoded as decimal strings so uint256 values survive JSON
consumers that parse numbers as doubles. The event log is not part of the
snapshot.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from ..config import LedgerParams, ledger_params_from_mapping
from ..state.addresses import canonical_address
from ..state.canonical import canonical_json_bytes, domain_sep_bytes, sha256_hex
from .erc20 import TokenLedger
from .pair import PairStorage


SNAPSHOT_VERSION = 1


def _amount_to_str(amount: int) -> str:
    return str(int(amount))


def _amount_from_str(raw: Any, *, name: str) -> int:
    if not isinstance(raw, str) or not (raw.isascii() and raw.isdigit()):
        raise ValueError(f"{name} must be a decimal string, got {raw!r}")
    return int(raw)


def pair_to_dict(storage: PairStorage) -> Dict[str, Any]:
    """Serialize pair storage. Keys are sorted for stable output."""
    ledger = storage.token
    balances = ledger.get_all_balances()
    allowances = ledger.get_all_allowances()
    return {
        "version": SNAPSHOT_VERSION,
        "token0": storage.token0,
        "token1": storage.token1,
        "fee_to": storage.fee_to,
        "lp_token": {
            "name": ledger.name,
            "symbol": ledger.symbol,
            "decimals": ledger.decimals,
        },
        "total_supply": _amount_to_str(ledger.total_supply),
        "balances": {owner: _amount_to_str(balances[owner]) for owner in sorted(balances)},
        "allowances": [
            {"owner": owner, "spender": spender, "amount": _amount_to_str(allowances[(owner, spender)])}
            for owner, spender in sorted(allowances)
        ],
    }


def pair_from_dict(d: Mapping[str, Any]) -> PairStorage:
    """Deserialize pair storage. Raises KeyError on missing fields."""
    version = d["version"]
    if version != SNAPSHOT_VERSION:
        raise ValueError(f"unsupported snapshot version: {version!r}")

    params: LedgerParams = ledger_params_from_mapping(d["lp_token"])
    balances = {
        canonical_address(owner, name="owner"): _amount_from_str(raw, name="balance")
        for owner, raw in d["balances"].items()
    }
    allowances = {}
    for entry in d["allowances"]:
        key = (
            canonical_address(entry["owner"], name="owner"),
            canonical_address(entry["spender"], name="spender"),
        )
        if key in allowances:
            raise ValueError(f"duplicate allowance entry: {key}")
        allowances[key] = _amount_from_str(entry["amount"], name="allowance")

    ledger = TokenLedger.restore(
        params,
        total_supply=_amount_from_str(d["total_supply"], name="total_supply"),
        balances=balances,
        allowances=allowances,
    )
    return PairStorage(
        token0=canonical_address(d["token0"], name="token0"),
        token1=canonical_address(d["token1"], name="token1"),
        fee_to=canonical_address(d["fee_to"], name="fee_to"),
        token=ledger,
    )


def compute_state_root(storage: PairStorage) -> str:
    """SHA-256 over the domain-separated canonical JSON snapshot."""
    payload = domain_sep_bytes("pair_state", SNAPSHOT_VERSION) + canonical_json_bytes(pair_to_dict(storage))
    return sha256_hex(payload)
