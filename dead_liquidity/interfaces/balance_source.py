"""Balance-history protocol — current and cutoff-time scaled balances."""
from typing import Protocol, Sequence

from ..models import ReserveBalances


class BalanceHistorySource(Protocol):
    """Abstract interface for batched balance lookups keyed by user-reserve id."""

    async def fetch_historical_balances(
        self, reference_keys: Sequence[str], cutoff: int
    ) -> dict[str, ReserveBalances]: ...
