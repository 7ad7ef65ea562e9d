"""Shared test fixtures and sample data."""
from __future__ import annotations

import dataclasses
import textwrap
from pathlib import Path
from typing import Any, Callable

import pytest

from dead_liquidity.analysis.fixed_point import RAY
from dead_liquidity.config import (
    AnalysisConfig,
    AppConfig,
    ReportConfig,
    SubgraphConfig,
    TokenConfig,
)
from dead_liquidity.models import (
    BalanceSnapshot,
    CandidateRecord,
    EligibleUser,
    HistoricalEvent,
    ReserveBalances,
    ResolvedUser,
)

# 2022-10-17T09:46:40Z
CUTOFF = 1_666_000_000
DAY = 24 * 60 * 60


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def cutoff() -> int:
    return CUTOFF


@pytest.fixture()
def sample_tokens() -> tuple[TokenConfig, ...]:
    return (
        TokenConfig(address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", symbol="USDC"),
        TokenConfig(address="0x6b175474e89094c44da98b954eedeac495271d0f", symbol="DAI"),
    )


@pytest.fixture()
def sample_app_config(
    tmp_path: Path, sample_tokens: tuple[TokenConfig, ...]
) -> AppConfig:
    return AppConfig(
        subgraph=SubgraphConfig(url="https://subgraph.example.com", timeout=10),
        analysis=AnalysisConfig(
            inactivity_window_seconds=2 * 365 * DAY,
            page_size=2,
            batch_size=2,
            history_lookback=10,
            debt_threshold=0.01,
        ),
        tokens=sample_tokens,
        report=ReportConfig(output_dir=str(tmp_path / "reports")),
    )


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def dead_candidate() -> CandidateRecord:
    """A candidate that passes every eligibility condition."""
    return CandidateRecord(
        reference_key="0xuser1-0xusdc-0xpool",
        address="0xuser1",
        scaled_balance=2_000_000,
        last_update_timestamp=CUTOFF - 30 * DAY,
        symbol="USDC",
        decimals=6,
        historical_supplies=(CUTOFF - 60 * DAY,),
        historical_borrows=(
            HistoricalEvent(timestamp=CUTOFF - 50 * DAY, amount="500", symbol="DAI"),
        ),
        historical_repays=(
            HistoricalEvent(timestamp=CUTOFF - 40 * DAY, amount="500.005", symbol="DAI"),
        ),
    )


@pytest.fixture()
def make_candidate(dead_candidate: CandidateRecord) -> Callable[..., CandidateRecord]:
    def _make(**overrides: Any) -> CandidateRecord:
        return dataclasses.replace(dead_candidate, **overrides)

    return _make


@pytest.fixture()
def make_eligible() -> Callable[..., EligibleUser]:
    def _make(key: str, **overrides: Any) -> EligibleUser:
        fields: dict[str, Any] = dict(
            address=f"0x{key}",
            scaled_balance=2_000_000,
            decimals=6,
            symbol="USDC",
            last_update_timestamp=CUTOFF - 30 * DAY,
            reference_key=key,
        )
        fields.update(overrides)
        return EligibleUser(**fields)

    return _make


@pytest.fixture()
def make_resolved() -> Callable[..., ResolvedUser]:
    def _make(current: int, historical: int, **overrides: Any) -> ResolvedUser:
        yield_earned = current - historical
        fields: dict[str, Any] = dict(
            address=f"0x{current}",
            reference_key=f"key-{current}",
            symbol="USDC",
            decimals=6,
            last_update_timestamp=CUTOFF - 30 * DAY,
            current_balance=current,
            historical_balance=historical,
            yield_earned=yield_earned,
            yield_percentage=(yield_earned * 10000 // historical) / 100,
            historical_timestamp=CUTOFF - 30 * DAY,
        )
        fields.update(overrides)
        return ResolvedUser(**fields)

    return _make


@pytest.fixture()
def growing_balances() -> ReserveBalances:
    """2.0 USDC at cutoff grown to 2.1 USDC (index 1.0 → 1.05)."""
    return ReserveBalances(
        scaled_balance=2_000_000,
        liquidity_index=105 * RAY // 100,
        snapshot=BalanceSnapshot(scaled_balance=2_000_000, index=RAY),
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    subgraph:
      url: "https://subgraph.example.com/${TEST_GRAPH_KEY}"
      timeout: 15
    analysis:
      inactivity_window_seconds: 86400
      page_size: 500
      batch_size: 25
      history_lookback: 5
      debt_threshold: 0.5
    tokens:
      - symbol: USDC
        address: "0xA0B86991C6218B36C1D19D4A2E9EB0CE3606EB48"
      - symbol: DAI
        address: "0x6b175474e89094c44da98b954eedeac495271d0f"
    report:
      output_dir: out
      filename_prefix: dead
      include_date: true
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Sample subgraph data
# ---------------------------------------------------------------------------


@pytest.fixture()
def raw_candidate() -> dict[str, Any]:
    return {
        "id": "0xuser1-0xusdc-0xpool",
        "currentATokenBalance": "2100000",
        "scaledATokenBalance": "2000000",
        "lastUpdateTimestamp": str(CUTOFF - 30 * DAY),
        "user": {
            "id": "0xuser1",
            "reserves": [],
            "variableDebtReserves": [],
            "recentSupplies": [],
            "recentWithdrawals": [],
            "recentBorrows": [],
            "recentRepays": [],
            "historicalTokenSupplies": [
                {"id": "s1", "timestamp": str(CUTOFF - 60 * DAY)}
            ],
            "historicalBorrows": [
                {
                    "id": "b1",
                    "timestamp": str(CUTOFF - 50 * DAY),
                    "amount": "500",
                    "reserve": {"symbol": "DAI"},
                }
            ],
            "historicalRepays": [
                {
                    "id": "r1",
                    "timestamp": str(CUTOFF - 40 * DAY),
                    "amount": "500",
                    "reserve": {"symbol": "DAI"},
                }
            ],
        },
        "reserve": {
            "id": "0xusdc-0xpool",
            "symbol": "USDC",
            "decimals": 6,
            "underlyingAsset": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
            "liquidityIndex": str(RAY),
            "pool": {"id": "0xpool"},
        },
    }


@pytest.fixture()
def raw_history_entry() -> dict[str, Any]:
    return {
        "id": "0xuser1-0xusdc-0xpool",
        "scaledATokenBalance": "2000000",
        "reserve": {"liquidityIndex": str(105 * RAY // 100), "decimals": 6},
        "historicalBalance": [
            {
                "timestamp": str(CUTOFF - DAY),
                "scaledATokenBalance": "2000000",
                "index": str(RAY),
            }
        ],
    }
