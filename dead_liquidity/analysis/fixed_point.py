"""RAY fixed-point arithmetic for scaled balances — exact integers only."""
from __future__ import annotations

RAY = 10**27


def to_int(value: int | str) -> int:
    """Parse a subgraph decimal string into an exact integer.

    Raises ValueError on malformed input; floats are never involved.
    """
    if isinstance(value, int):
        return value
    return int(value.strip(), 10)


def resolve_balance(scaled_balance: int | str, index: int | str) -> int:
    """Convert a scaled balance into underlying units.

        balance = scaled_balance * index / RAY   (truncated)

    Examples:
        resolve_balance(2_000_000, 105 * 10**25) → 2_100_000
        resolve_balance(0, RAY) → 0
    """
    scaled = to_int(scaled_balance)
    idx = to_int(index)
    if scaled < 0 or idx < 0:
        raise ValueError(
            f"Scaled balance and index must be non-negative, got {scaled} and {idx}"
        )
    return (scaled * idx) // RAY
