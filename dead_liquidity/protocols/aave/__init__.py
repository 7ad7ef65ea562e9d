"""Aave lending protocol (subgraph-backed)."""
from .adapter import AaveSubgraphAdapter

__all__ = ["AaveSubgraphAdapter"]
