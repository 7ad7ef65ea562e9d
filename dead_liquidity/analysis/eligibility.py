"""Dead-liquidity eligibility — pure functions over candidate records."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ..models import CandidateRecord, EligibleUser, HistoricalEvent

logger = logging.getLogger(__name__)

# Outstanding debt at or below this is treated as repaid. Amounts are
# human-scale floats, so repeated partial repays leave dust.
DEBT_DUST_THRESHOLD = 0.01


@dataclass
class AssetDebtTally:
    borrowed: float = 0.0
    repaid: float = 0.0

    @property
    def outstanding(self) -> float:
        return self.borrowed - self.repaid


def tally_debt(
    borrow_events: Iterable[HistoricalEvent],
    repay_events: Iterable[HistoricalEvent],
    cutoff: int,
) -> dict[str, AssetDebtTally]:
    """Sum pre-cutoff borrows and repays per asset symbol."""
    tallies: dict[str, AssetDebtTally] = {}

    for event in borrow_events:
        if event.timestamp < cutoff:
            tallies.setdefault(event.symbol, AssetDebtTally()).borrowed += float(
                event.amount
            )

    for event in repay_events:
        if event.timestamp < cutoff:
            tallies.setdefault(event.symbol, AssetDebtTally()).repaid += float(
                event.amount
            )

    return tallies


def had_no_open_debt_at_cutoff(
    borrow_events: Iterable[HistoricalEvent],
    repay_events: Iterable[HistoricalEvent],
    cutoff: int,
    threshold: float = DEBT_DUST_THRESHOLD,
) -> bool:
    """True unless some asset had more than ``threshold`` borrowed and unrepaid."""
    for symbol, tally in tally_debt(borrow_events, repay_events, cutoff).items():
        if tally.outstanding > threshold:
            logger.debug(
                "Open %s debt at cutoff: %.6f outstanding", symbol, tally.outstanding
            )
            return False
    return True


def is_dead_liquidity(
    record: CandidateRecord,
    cutoff: int,
    threshold: float = DEBT_DUST_THRESHOLD,
) -> bool:
    """Strict conjunction of the dead-liquidity conditions.

    1. no supply/withdraw/borrow/repay at or after the cutoff
    2. no current stable or variable debt
    3. at least one supply of this asset before the cutoff
    4. the position itself was last updated before the cutoff
    5. every asset borrowed before the cutoff was repaid by then
    """
    has_recent_activity = bool(
        record.recent_supplies
        or record.recent_withdrawals
        or record.recent_borrows
        or record.recent_repays
    )
    if has_recent_activity:
        return False

    if record.stable_debt_reserves or record.variable_debt_reserves:
        return False

    if not record.historical_supplies:
        return False

    if record.last_update_timestamp >= cutoff:
        return False

    return had_no_open_debt_at_cutoff(
        record.historical_borrows, record.historical_repays, cutoff, threshold
    )


def classify(
    records: Iterable[CandidateRecord],
    cutoff: int,
    threshold: float = DEBT_DUST_THRESHOLD,
) -> list[EligibleUser]:
    """Keep the records that qualify, preserving order."""
    eligible: list[EligibleUser] = []
    for record in records:
        if not is_dead_liquidity(record, cutoff, threshold):
            continue
        eligible.append(
            EligibleUser(
                address=record.address,
                scaled_balance=record.scaled_balance,
                decimals=record.decimals,
                symbol=record.symbol,
                last_update_timestamp=record.last_update_timestamp,
                reference_key=record.reference_key,
            )
        )
    return eligible
