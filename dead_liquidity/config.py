"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_SUBGRAPH_URL = (
    "https://gateway.thegraph.com/api/${GRAPH_API_KEY}"
    "/subgraphs/id/Cd2gEDVeqnjBn1hSeqFMitw8Q1iiyV9FYUZkLNRcL87g"
)

SECONDS_PER_YEAR = 365 * 24 * 60 * 60

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SubgraphConfig:
    url: str = DEFAULT_SUBGRAPH_URL
    timeout: int = 60


@dataclass(frozen=True)
class AnalysisConfig:
    inactivity_window_seconds: int = 2 * SECONDS_PER_YEAR
    page_size: int = 1000
    batch_size: int = 50
    history_lookback: int = 10
    debt_threshold: float = 0.01


@dataclass(frozen=True)
class TokenConfig:
    address: str = ""
    symbol: str = ""


@dataclass(frozen=True)
class ReportConfig:
    output_dir: str = "."
    filename_prefix: str = "aave-dead-liquidity"
    include_date: bool = False


DEFAULT_TOKENS: tuple[TokenConfig, ...] = (
    TokenConfig(address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", symbol="USDC"),
    TokenConfig(address="0xdac17f958d2ee523a2206206994597c13d831ec7", symbol="USDT"),
    TokenConfig(address="0x6b175474e89094c44da98b954eedeac495271d0f", symbol="DAI"),
)


@dataclass(frozen=True)
class AppConfig:
    subgraph: SubgraphConfig = field(default_factory=SubgraphConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    tokens: tuple[TokenConfig, ...] = DEFAULT_TOKENS
    report: ReportConfig = field(default_factory=ReportConfig)

    def token(self, symbol: str) -> TokenConfig:
        """Look up a configured token by symbol (case-insensitive)."""
        for token in self.tokens:
            if token.symbol.upper() == symbol.upper():
                return token
        raise ValueError(f"Unknown token '{symbol}'")


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_subgraph(raw: dict[str, Any]) -> SubgraphConfig:
    return SubgraphConfig(
        url=raw.get("url", _interpolate_env(DEFAULT_SUBGRAPH_URL)),
        timeout=int(raw.get("timeout", 60)),
    )


def _build_analysis(raw: dict[str, Any]) -> AnalysisConfig:
    window = raw.get("inactivity_window_seconds")
    if window is None:
        window = int(float(raw.get("inactivity_window_years", 2)) * SECONDS_PER_YEAR)
    return AnalysisConfig(
        inactivity_window_seconds=int(window),
        page_size=int(raw.get("page_size", 1000)),
        batch_size=int(raw.get("batch_size", 50)),
        history_lookback=int(raw.get("history_lookback", 10)),
        debt_threshold=float(raw.get("debt_threshold", 0.01)),
    )


def _build_tokens(raw: list[dict[str, Any]] | None) -> tuple[TokenConfig, ...]:
    if raw is None:
        return DEFAULT_TOKENS
    tokens: list[TokenConfig] = []
    for t in raw:
        tokens.append(
            TokenConfig(
                address=str(t.get("address", "")).lower(),
                symbol=str(t.get("symbol", "")),
            )
        )
    return tuple(tokens)


def _build_report(raw: dict[str, Any]) -> ReportConfig:
    return ReportConfig(
        output_dir=str(raw.get("output_dir", ".")),
        filename_prefix=raw.get("filename_prefix", "aave-dead-liquidity"),
        include_date=bool(raw.get("include_date", False)),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (two levels up from this file).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        subgraph=_build_subgraph(raw.get("subgraph") or {}),
        analysis=_build_analysis(raw.get("analysis") or {}),
        tokens=_build_tokens(raw.get("tokens")),
        report=_build_report(raw.get("report") or {}),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.subgraph.url:
        raise ValueError("Subgraph URL must be configured")

    if not cfg.tokens:
        raise ValueError("At least one token must be configured")

    seen: set[str] = set()
    for token in cfg.tokens:
        if not token.symbol:
            raise ValueError(f"Token '{token.address}' has no symbol")
        if not token.address:
            raise ValueError(f"Token '{token.symbol}' has no address")
        if token.symbol.upper() in seen:
            raise ValueError(f"Token '{token.symbol}' is configured twice")
        seen.add(token.symbol.upper())

    analysis = cfg.analysis
    for name in ("inactivity_window_seconds", "page_size", "batch_size", "history_lookback"):
        if getattr(analysis, name) <= 0:
            raise ValueError(f"analysis.{name} must be positive")
    if analysis.debt_threshold < 0:
        raise ValueError("analysis.debt_threshold must not be negative")
