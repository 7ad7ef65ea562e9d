"""Pure parsing functions for Aave subgraph responses — no I/O."""
from __future__ import annotations

from typing import Any

from ...analysis.fixed_point import to_int
from ...models import BalanceSnapshot, CandidateRecord, HistoricalEvent, ReserveBalances


def _ids(entries: list[dict[str, Any]] | None) -> tuple[str, ...]:
    return tuple(str(e.get("id", "")) for e in entries or [])


def parse_event(entry: dict[str, Any]) -> HistoricalEvent:
    """Parse a borrow/repay history entry.

    Example:
        {"timestamp": "1650000000", "amount": "1000.5", "reserve": {"symbol": "USDC"}}
        → HistoricalEvent(1650000000, "1000.5", "USDC")
    """
    return HistoricalEvent(
        timestamp=int(entry["timestamp"]),
        amount=str(entry["amount"]),
        symbol=entry.get("reserve", {}).get("symbol", ""),
    )


def parse_candidate(entry: dict[str, Any]) -> CandidateRecord:
    """Parse one ``userReserves`` item of the candidate query."""
    user = entry.get("user", {})
    reserve = entry.get("reserve", {})

    return CandidateRecord(
        reference_key=entry["id"],
        address=user.get("id", ""),
        scaled_balance=to_int(entry["scaledATokenBalance"]),
        last_update_timestamp=int(entry["lastUpdateTimestamp"]),
        symbol=reserve.get("symbol", ""),
        decimals=int(reserve.get("decimals", 0)),
        stable_debt_reserves=_ids(user.get("reserves")),
        variable_debt_reserves=_ids(user.get("variableDebtReserves")),
        recent_supplies=_ids(user.get("recentSupplies")),
        recent_withdrawals=_ids(user.get("recentWithdrawals")),
        recent_borrows=_ids(user.get("recentBorrows")),
        recent_repays=_ids(user.get("recentRepays")),
        historical_supplies=tuple(
            int(s["timestamp"]) for s in user.get("historicalTokenSupplies") or []
        ),
        historical_borrows=tuple(
            parse_event(e) for e in user.get("historicalBorrows") or []
        ),
        historical_repays=tuple(
            parse_event(e) for e in user.get("historicalRepays") or []
        ),
    )


def parse_reserve_balances(entry: dict[str, Any]) -> ReserveBalances:
    """Parse one ``userReserves`` item of the history query.

    The snapshot is None when the user has no balance record at or before
    the cutoff.
    """
    reserve = entry.get("reserve", {})
    history = entry.get("historicalBalance") or []

    snapshot = None
    if history:
        record = history[0]
        snapshot = BalanceSnapshot(
            scaled_balance=to_int(record["scaledATokenBalance"]),
            index=to_int(record["index"]),
        )

    return ReserveBalances(
        scaled_balance=to_int(entry["scaledATokenBalance"]),
        liquidity_index=to_int(reserve["liquidityIndex"]),
        snapshot=snapshot,
    )
