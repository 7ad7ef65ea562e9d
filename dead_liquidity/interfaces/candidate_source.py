"""Candidate source protocol — paginated dead-liquidity candidates."""
from typing import Protocol

from ..models import CandidateRecord


class CandidateSource(Protocol):
    """Abstract interface for fetching candidate user-reserve positions."""

    async def fetch_candidates(
        self, token_address: str, cutoff: int, page_size: int, skip: int
    ) -> list[CandidateRecord]: ...

    async def fetch_all_candidates(
        self, token_address: str, cutoff: int, page_size: int
    ) -> list[CandidateRecord]: ...
