"""Protocol interfaces for the dead-liquidity analyzer."""
from .balance_source import BalanceHistorySource
from .candidate_source import CandidateSource
from .report_sink import ReportSink

__all__ = ["BalanceHistorySource", "CandidateSource", "ReportSink"]
