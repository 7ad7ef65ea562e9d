"""Ranking and CSV rendering for resolved dead-liquidity cohorts."""
from __future__ import annotations

import csv
import io
import time
from datetime import datetime, timezone
from typing import Sequence

from ..config import SECONDS_PER_YEAR
from ..models import ResolvedUser
from .resolver import yield_percentage

HUMAN_FRACTION_DIGITS = 6
DEFAULT_DECIMALS = 6
FALLBACK_CUTOFF_DATE = "2022-10-17"


def rank(users: Sequence[ResolvedUser]) -> list[ResolvedUser]:
    """Sort by current balance, largest first; ties keep their input order."""
    return sorted(users, key=lambda u: u.current_balance, reverse=True)


def to_human(amount: int, decimals: int) -> str:
    """Format a smallest-unit integer as a decimal string, truncating to 6 places.

    Trailing fractional zeros are dropped on purpose, so 2.1 USDC renders as
    "2.1" rather than the fixed-width "2.100000".

    Examples:
        to_human(1234567, 6) → "1.234567"
        to_human(1000000, 6) → "1"
        to_human(123456789, 8) → "1.234567"
    """
    base = 10**decimals
    whole, frac = divmod(amount, base)
    frac_str = str(frac).zfill(decimals)[:HUMAN_FRACTION_DIGITS].rstrip("0")
    return f"{whole}.{frac_str}".rstrip(".")


def iso_date(timestamp: int) -> str:
    """UTC calendar date of a unix timestamp, e.g. '2022-10-17'."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")


def years_inactive(last_update_timestamp: int, now: int) -> float:
    return (now - last_update_timestamp) / SECONDS_PER_YEAR


def build_header(token_symbol: str, cutoff: int | None) -> list[str]:
    cutoff_date = iso_date(cutoff) if cutoff else FALLBACK_CUTOFF_DATE
    return [
        "User Address",
        f"Current {token_symbol} Balance",
        f"{cutoff_date} {token_symbol} Balance",
        "Exact Yield Earned",
        "Yield %",
        "Years Inactive",
        "Historical Date",
    ]


def build_row(user: ResolvedUser, now: int) -> list[str]:
    return [
        user.address,
        to_human(user.current_balance, user.decimals),
        to_human(user.historical_balance, user.decimals),
        to_human(user.yield_earned, user.decimals),
        f"{user.yield_percentage:.2f}",
        f"{years_inactive(user.last_update_timestamp, now):.1f}",
        iso_date(user.historical_timestamp),
    ]


def build_totals_row(users: Sequence[ResolvedUser]) -> list[str]:
    """Aggregate row; the average yield is weighted by historical balance."""
    total_current = sum(u.current_balance for u in users)
    total_historical = sum(u.historical_balance for u in users)
    total_yield = sum(u.yield_earned for u in users)
    avg_yield = yield_percentage(total_yield, total_historical)
    decimals = users[0].decimals if users else DEFAULT_DECIMALS

    return [
        f"TOTALS ({len(users)} users)",
        to_human(total_current, decimals),
        to_human(total_historical, decimals),
        to_human(total_yield, decimals),
        f"{avg_yield:.2f}",
        "",
        "",
    ]


def render_csv(
    users: Sequence[ResolvedUser],
    token_symbol: str | None = None,
    cutoff: int | None = None,
    now: int | None = None,
) -> str:
    """Render the ranked cohort as CSV text: header, one row per user, totals."""
    symbol = token_symbol or (users[0].symbol if users else "TOKEN")
    if now is None:
        now = int(time.time())

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(build_header(symbol, cutoff))
    for user in users:
        writer.writerow(build_row(user, now))
    writer.writerow(build_totals_row(users))
    return buffer.getvalue()
