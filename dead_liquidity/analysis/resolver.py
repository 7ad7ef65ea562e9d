"""Balance and yield resolution for eligible users."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..interfaces.balance_source import BalanceHistorySource
from ..models import EligibleUser, ReserveBalances, ResolvedUser
from ..subgraph import SubgraphError
from .fixed_point import resolve_balance

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 50


@dataclass(frozen=True)
class BatchResult:
    """Outcome of one balance-lookup batch; ``error`` set means no data."""

    keys: tuple[str, ...]
    balances: dict[str, ReserveBalances] = field(default_factory=dict)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def yield_percentage(yield_earned: int, historical_balance: int) -> float:
    """Yield as a percentage with two decimals of integer precision.

    Example: yield 100_000 on 2_000_000 → 5.0
    """
    if historical_balance <= 0:
        return 0.0
    return (yield_earned * 10000 // historical_balance) / 100


def resolve_user(
    user: EligibleUser, balances: ReserveBalances | None
) -> ResolvedUser | None:
    """Combine an eligible user with its balance lookup.

    Returns None when there is no cutoff snapshot, the cutoff balance is not
    positive, or the yield is negative.
    """
    if balances is None or balances.snapshot is None:
        logger.debug("No balance snapshot for %s", user.reference_key)
        return None

    current = resolve_balance(balances.scaled_balance, balances.liquidity_index)
    historical = resolve_balance(
        balances.snapshot.scaled_balance, balances.snapshot.index
    )
    yield_earned = current - historical

    if historical <= 0 or yield_earned < 0:
        logger.debug(
            "Dropping %s: historical=%d yield=%d",
            user.reference_key, historical, yield_earned,
        )
        return None

    return ResolvedUser(
        address=user.address,
        reference_key=user.reference_key,
        symbol=user.symbol,
        decimals=user.decimals,
        last_update_timestamp=user.last_update_timestamp,
        current_balance=current,
        historical_balance=historical,
        yield_earned=yield_earned,
        yield_percentage=yield_percentage(yield_earned, historical),
        historical_timestamp=user.last_update_timestamp,
    )


async def _fetch_batch(
    source: BalanceHistorySource, keys: Sequence[str], cutoff: int
) -> BatchResult:
    try:
        balances = await source.fetch_historical_balances(list(keys), cutoff)
    except SubgraphError as e:
        return BatchResult(keys=tuple(keys), error=e)
    return BatchResult(keys=tuple(keys), balances=balances)


async def fetch_balances(
    source: BalanceHistorySource,
    reference_keys: Sequence[str],
    cutoff: int,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> dict[str, ReserveBalances]:
    """Look up balances in sequential batches; failed batches contribute nothing."""
    if batch_size <= 0:
        raise ValueError("batch_size must be positive")

    merged: dict[str, ReserveBalances] = {}
    for start in range(0, len(reference_keys), batch_size):
        result = await _fetch_batch(
            source, reference_keys[start:start + batch_size], cutoff
        )
        if result.ok:
            merged.update(result.balances)
        else:
            logger.error(
                "Error fetching balances for batch of %d (%s): %s",
                len(result.keys), ", ".join(result.keys), result.error,
            )
    return merged


async def resolve_users(
    users: Sequence[EligibleUser],
    source: BalanceHistorySource,
    cutoff: int,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> list[ResolvedUser]:
    """Resolve current and cutoff balances, keeping only valid users (input order)."""
    keys = [u.reference_key for u in users]
    balances = await fetch_balances(source, keys, cutoff, batch_size)

    resolved: list[ResolvedUser] = []
    for user in users:
        result = resolve_user(user, balances.get(user.reference_key))
        if result is not None:
            resolved.append(result)

    logger.info("Resolved %d of %d eligible users", len(resolved), len(users))
    return resolved
