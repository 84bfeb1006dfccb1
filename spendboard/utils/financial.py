"""
Financial utility functions.

All monetary values use :class:`decimal.Decimal` so that summing many
expenses never drifts the way IEEE-754 floats do.  Every amount is assumed
to be in a single currency (USD) for display.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

# ── Constants ────────────────────────────────────────────────────────────────

ZERO = Decimal("0")
CENT = Decimal("0.01")
CURRENCY_SYMBOL = "$"

# Largest magnitude accepted for a single expense
MAX_AMOUNT = Decimal("1e15")


# ── Display ──────────────────────────────────────────────────────────────────

def format_currency(value: Decimal) -> str:
    """
    Render *value* the way an en-US currency formatter does.

    Examples
    --------
    >>> format_currency(Decimal("1234.5"))
    '$1,234.50'
    >>> format_currency(Decimal("-4.5"))
    '-$4.50'
    """
    with localcontext() as ctx:
        # quantize needs every integer digit plus the two cents in precision
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounded = value.quantize(CENT, rounding=ROUND_HALF_UP)
        sign = "-" if rounded < ZERO else ""
        return f"{sign}{CURRENCY_SYMBOL}{abs(rounded):,.2f}"


# ── Serialisation helpers ────────────────────────────────────────────────────

def decimal_to_float(value: Decimal) -> float:
    """Convert Decimal → float for JSON serialisation."""
    return float(value)


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """
    Safely convert a raw value to a finite :class:`~decimal.Decimal`.

    Booleans are rejected even though Python treats them as integers.

    Raises
    ------
    ValueError
        If *value* cannot be interpreted as a finite decimal number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to Decimal: booleans are not amounts")
    try:
        result = Decimal(str(value).strip())
    except Exception as exc:
        raise ValueError(f"Cannot convert {value!r} to Decimal: {exc}") from exc
    if not result.is_finite():
        raise ValueError(f"Cannot convert {value!r} to Decimal: not a finite number")
    return result
