"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoricalEvent:
    """Pre-cutoff borrow or repay event.

    ``amount`` keeps the subgraph's decimal string; it is parsed where it is
    reconciled.
    """

    timestamp: int
    amount: str
    symbol: str


@dataclass(frozen=True)
class CandidateRecord:
    """One user-reserve position as returned by the candidate query."""

    reference_key: str
    address: str
    scaled_balance: int
    last_update_timestamp: int
    symbol: str
    decimals: int
    stable_debt_reserves: tuple[str, ...] = ()
    variable_debt_reserves: tuple[str, ...] = ()
    recent_supplies: tuple[str, ...] = ()
    recent_withdrawals: tuple[str, ...] = ()
    recent_borrows: tuple[str, ...] = ()
    recent_repays: tuple[str, ...] = ()
    historical_supplies: tuple[int, ...] = ()
    historical_borrows: tuple[HistoricalEvent, ...] = ()
    historical_repays: tuple[HistoricalEvent, ...] = ()


@dataclass(frozen=True)
class EligibleUser:
    """Candidate that passed the dead-liquidity classifier."""

    address: str
    scaled_balance: int
    decimals: int
    symbol: str
    last_update_timestamp: int
    reference_key: str


@dataclass(frozen=True)
class BalanceSnapshot:
    """Most recent aToken balance record at or before the cutoff."""

    scaled_balance: int
    index: int


@dataclass(frozen=True)
class ReserveBalances:
    """Current scaled balance and index plus the optional cutoff snapshot."""

    scaled_balance: int
    liquidity_index: int
    snapshot: BalanceSnapshot | None = None


@dataclass(frozen=True)
class ResolvedUser:
    """Eligible user with exact current and cutoff-time balances."""

    address: str
    reference_key: str
    symbol: str
    decimals: int
    last_update_timestamp: int
    current_balance: int
    historical_balance: int
    yield_earned: int
    yield_percentage: float
    historical_timestamp: int


@dataclass(frozen=True)
class TokenResult:
    """Outcome of one token's analysis."""

    symbol: str
    candidates: int
    users: tuple[ResolvedUser, ...] = ()
    report_path: str = ""
