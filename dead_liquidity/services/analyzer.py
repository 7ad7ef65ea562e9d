"""Dead-liquidity orchestration — iterates configured tokens."""
from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Iterable, Protocol

from ..analysis.eligibility import classify
from ..analysis.reporting import rank, render_csv
from ..analysis.resolver import resolve_users
from ..config import AppConfig, TokenConfig
from ..interfaces.balance_source import BalanceHistorySource
from ..interfaces.candidate_source import CandidateSource
from ..interfaces.report_sink import ReportSink
from ..models import TokenResult
from ..protocols.aave import AaveSubgraphAdapter
from ..reports import CsvReportWriter
from ..subgraph import SubgraphClient

logger = logging.getLogger(__name__)


class AaveSource(CandidateSource, BalanceHistorySource, Protocol):
    """Both collaborator roles, as served by one subgraph adapter."""


class DeadLiquidityAnalyzer:
    """Runs the candidate → eligibility → resolution → report pipeline per token."""

    def __init__(
        self,
        config: AppConfig,
        source: AaveSource | None = None,
        sink: ReportSink | None = None,
    ) -> None:
        self._config = config
        self._analysis = config.analysis

        if source is None:
            source = AaveSubgraphAdapter(
                SubgraphClient(config.subgraph),
                history_lookback=config.analysis.history_lookback,
            )
        self._source = source
        self._sink: ReportSink = sink or CsvReportWriter(config.report)

    def cutoff_for(self, now: int | None = None) -> int:
        """Unix timestamp that starts the inactivity window."""
        if now is None:
            now = int(time.time())
        return now - self._analysis.inactivity_window_seconds

    def _select_tokens(self, symbols: Iterable[str] | None) -> list[TokenConfig]:
        if not symbols:
            return list(self._config.tokens)
        return [self._config.token(s) for s in symbols]

    async def analyze_token(self, token: TokenConfig, cutoff: int) -> TokenResult:
        """Analyze one token and persist its report."""
        logger.info("Analyzing %s (%s)...", token.symbol, token.address)

        candidates = await self._source.fetch_all_candidates(
            token.address, cutoff, self._analysis.page_size
        )
        logger.info("Found %d potential %s users", len(candidates), token.symbol)

        eligible = classify(candidates, cutoff, self._analysis.debt_threshold)
        logger.info("%d %s users pass the eligibility checks", len(eligible), token.symbol)

        resolved = await resolve_users(
            eligible, self._source, cutoff, self._analysis.batch_size
        )
        ranked = rank(resolved)
        logger.info("Found %d dead liquidity %s users", len(ranked), token.symbol)

        report = render_csv(ranked, token.symbol, cutoff)
        path = self._sink.write(token.symbol, report)

        return TokenResult(
            symbol=token.symbol,
            candidates=len(candidates),
            users=tuple(ranked),
            report_path=str(path),
        )

    async def run(
        self, cutoff: int | None = None, symbols: Iterable[str] | None = None
    ) -> list[TokenResult]:
        """Analyze the selected tokens one after another and log a summary."""
        tokens = self._select_tokens(symbols)
        if cutoff is None:
            cutoff = self.cutoff_for()

        logger.info("Starting multi-token analysis")
        logger.info(
            "Cutoff date: %s",
            datetime.fromtimestamp(cutoff, tz=timezone.utc).isoformat(),
        )
        logger.info("Analyzing tokens: %s", ", ".join(t.symbol for t in tokens))

        results: list[TokenResult] = []
        for token in tokens:
            results.append(await self.analyze_token(token, cutoff))

        total = sum(len(r.users) for r in results)
        logger.info("Total dead liquidity users across all tokens: %d", total)
        logger.info("Breakdown by token:")
        for result in results:
            logger.info("  %s: %d users", result.symbol, len(result.users))

        return results
