"""Flat-file CSV report sink."""
import logging
from datetime import datetime, timezone
from pathlib import Path

from ..config import ReportConfig

logger = logging.getLogger(__name__)


class CsvReportWriter:
    """Write one CSV report per token, replacing any previous file."""

    def __init__(self, config: ReportConfig) -> None:
        self.output_dir = Path(config.output_dir)
        self.filename_prefix = config.filename_prefix
        self.include_date = config.include_date

    def filename_for(self, token_symbol: str, today: datetime | None = None) -> str:
        """e.g. ``aave-dead-liquidity-usdc.csv`` or ``...-usdc-2024-10-17.csv``."""
        name = f"{self.filename_prefix}-{token_symbol.lower()}"
        if self.include_date:
            today = today or datetime.now(timezone.utc)
            name = f"{name}-{today.strftime('%Y-%m-%d')}"
        return f"{name}.csv"

    def write(self, token_symbol: str, content: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / self.filename_for(token_symbol)
        path.write_text(content)
        logger.info("%s CSV saved to: %s", token_symbol, path)
        return path
