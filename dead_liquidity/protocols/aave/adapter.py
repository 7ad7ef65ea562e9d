"""Aave subgraph adapter — candidate and balance-history sources."""
from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

from ...models import CandidateRecord, ReserveBalances
from . import parser
from .queries import DEAD_LIQUIDITY_CANDIDATES_QUERY, USER_RESERVES_HISTORY_QUERY

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LOOKBACK = 10


class GraphQLClient(Protocol):
    async def query(
        self, query: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]: ...


class AaveSubgraphAdapter:
    """Fetch dead-liquidity candidates and balance history from the Aave subgraph."""

    def __init__(
        self,
        client: GraphQLClient,
        history_lookback: int = DEFAULT_HISTORY_LOOKBACK,
    ) -> None:
        self._client = client
        self._history_lookback = history_lookback

    async def fetch_candidates(
        self, token_address: str, cutoff: int, page_size: int, skip: int
    ) -> list[CandidateRecord]:
        """Fetch one page of positions currently holding ``token_address``."""
        data = await self._client.query(
            DEAD_LIQUIDITY_CANDIDATES_QUERY,
            {
                "tokenAddress": token_address,
                "cutoff": cutoff,
                "first": page_size,
                "skip": skip,
                "lookback": self._history_lookback,
            },
        )
        return [parser.parse_candidate(e) for e in data.get("userReserves") or []]

    async def fetch_all_candidates(
        self, token_address: str, cutoff: int, page_size: int
    ) -> list[CandidateRecord]:
        """Page through candidates until an empty page comes back."""
        candidates: list[CandidateRecord] = []
        skip = 0

        while True:
            page = await self.fetch_candidates(token_address, cutoff, page_size, skip)
            if not page:
                break
            candidates.extend(page)
            skip += len(page)
            logger.debug("Fetched %d candidates so far for %s", skip, token_address)

        return candidates

    async def fetch_historical_balances(
        self, reference_keys: Sequence[str], cutoff: int
    ) -> dict[str, ReserveBalances]:
        """Current and cutoff-time balances for one batch of user-reserve ids."""
        data = await self._client.query(
            USER_RESERVES_HISTORY_QUERY,
            {"userReserveIds": list(reference_keys), "cutoff": cutoff},
        )

        balances: dict[str, ReserveBalances] = {}
        for entry in data.get("userReserves") or []:
            balances[entry["id"]] = parser.parse_reserve_balances(entry)
        return balances
