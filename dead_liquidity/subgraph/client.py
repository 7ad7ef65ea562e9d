"""The Graph subgraph client — GraphQL over HTTPS."""
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ..config import SubgraphConfig

logger = logging.getLogger(__name__)


class SubgraphError(RuntimeError):
    """Transport or GraphQL failure while querying the subgraph."""


class SubgraphClient:
    """Minimal GraphQL client for a single subgraph endpoint."""

    def __init__(self, config: SubgraphConfig) -> None:
        self.url = config.url
        self.timeout = config.timeout

    async def query(
        self, query: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """POST a GraphQL document and return its ``data`` object."""
        payload = {"query": query, "variables": variables or {}}

        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        try:
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.post(
                    self.url,
                    json=payload,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        raise SubgraphError(
                            f"Subgraph returned HTTP {response.status}"
                        )
                    result = await response.json()
        except SubgraphError:
            raise
        except Exception as e:
            raise SubgraphError(f"Subgraph request failed: {e}") from e

        errors = result.get("errors")
        if errors:
            messages = "; ".join(str(err.get("message", err)) for err in errors)
            raise SubgraphError(f"GraphQL Error: {messages}")

        data = result.get("data")
        if data is None:
            raise SubgraphError("Subgraph response has no data")
        logger.debug("Subgraph query returned keys: %s", ", ".join(data))
        return data
