"""
LP token metadata configuration.

Sources, in the order callers usually combine them:
- built-in defaults (``LedgerParams()``),
- environment variables (``ledger_params_from_env``),
- a YAML deployment file (``load_ledger_params``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml


DEFAULT_LP_NAME = "Uniswap V2"
DEFAULT_LP_SYMBOL = "UNI-V2"
DEFAULT_LP_DECIMALS = 18

MAX_LP_DECIMALS = 77  # 10**77 < 2**256 <= 10**78

ENV_LP_NAME = "V2PAIR_LP_NAME"
ENV_LP_SYMBOL = "V2PAIR_LP_SYMBOL"
ENV_LP_DECIMALS = "V2PAIR_LP_DECIMALS"


@dataclass(frozen=True)
class LedgerParams:
    """Static metadata of the embedded LP token."""

    name: str = DEFAULT_LP_NAME
    symbol: str = DEFAULT_LP_SYMBOL
    decimals: int = DEFAULT_LP_DECIMALS

    def __post_init__(self) -> None:
        for field_name in ("name", "symbol"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{field_name} must be a non-empty string")
            # Undecodable env bytes arrive as lone surrogates (surrogateescape).
            if any(0xD800 <= ord(ch) <= 0xDFFF for ch in value):
                raise ValueError(f"{field_name} must be valid unicode text")
        if not isinstance(self.decimals, int) or isinstance(self.decimals, bool):
            raise TypeError("decimals must be an int")
        if not (0 <= self.decimals <= MAX_LP_DECIMALS):
            raise ValueError(f"decimals must be in [0, {MAX_LP_DECIMALS}]: {self.decimals}")


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def ledger_params_from_env(base: Optional[LedgerParams] = None) -> LedgerParams:
    """
    Build LedgerParams from environment variables.

    Blank or missing variables fall back to ``base`` (or the defaults);
    out-of-range decimals are clamped.
    """
    base = base or LedgerParams()
    return LedgerParams(
        name=_env_str(ENV_LP_NAME, base.name),
        symbol=_env_str(ENV_LP_SYMBOL, base.symbol),
        decimals=_env_int(ENV_LP_DECIMALS, base.decimals, lo=0, hi=MAX_LP_DECIMALS),
    )


def ledger_params_from_mapping(obj: Mapping[str, Any]) -> LedgerParams:
    """Build LedgerParams from a mapping; missing keys use the defaults."""
    if not isinstance(obj, Mapping):
        raise TypeError("ledger params must be a mapping")
    unknown = set(obj) - {"name", "symbol", "decimals"}
    if unknown:
        raise ValueError(f"unknown ledger params: {sorted(unknown)}")
    return LedgerParams(
        name=obj.get("name", DEFAULT_LP_NAME),
        symbol=obj.get("symbol", DEFAULT_LP_SYMBOL),
        decimals=obj.get("decimals", DEFAULT_LP_DECIMALS),
    )


def load_ledger_params(path: Union[str, Path]) -> LedgerParams:
    """
    Load LedgerParams from a YAML file.

    The file is either a flat mapping (name/symbol/decimals) or a mapping with
    a top-level ``lp_token`` section holding those keys.
    """
    obj = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if obj is None:
        return LedgerParams()
    if not isinstance(obj, Mapping):
        raise TypeError("ledger params YAML must be a mapping")
    section = obj.get("lp_token", obj)
    return ledger_params_from_mapping(section)
