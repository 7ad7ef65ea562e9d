"""Report sink protocol — persists one rendered report per token."""
from pathlib import Path
from typing import Protocol


class ReportSink(Protocol):
    """Abstract interface for storing rendered reports."""

    def write(self, token_symbol: str, content: str) -> Path: ...
