"""Dead-liquidity analysis pipeline: eligibility, balance resolution, reporting."""
from .eligibility import classify, had_no_open_debt_at_cutoff, is_dead_liquidity
from .fixed_point import RAY, resolve_balance
from .reporting import rank, render_csv, to_human
from .resolver import resolve_users

__all__ = [
    "RAY",
    "classify",
    "had_no_open_debt_at_cutoff",
    "is_dead_liquidity",
    "rank",
    "render_csv",
    "resolve_balance",
    "resolve_users",
    "to_human",
]
