"""Subgraph transport."""
from .client import SubgraphClient, SubgraphError

__all__ = ["SubgraphClient", "SubgraphError"]
