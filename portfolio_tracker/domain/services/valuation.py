"""Per-holding valuation arithmetic.

All figures are decimal.Decimal; binary floating point is never used.

Rounding discipline:
  - Products, sums and differences are carried exactly (_EXACT context).
  - Divisions are carried at 34 significant digits (decimal128 equivalent).
  - Each output figure is rounded once, to 4 decimal places, ROUND_HALF_UP.

All functions are pure and safe to call from any thread: they pass explicit
contexts and never touch the thread-local decimal context.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
)

SCALE = 4
_QUANTUM = Decimal(1).scaleb(-SCALE)  # 0.0001
_HUNDRED = Decimal(100)
ZERO = Decimal(0).quantize(_QUANTUM)

_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)
_DECIMAL128 = Context(prec=34, rounding=ROUND_HALF_EVEN)


def round_amount(value: Decimal) -> Decimal:
    """Round to 4 decimal places, half away from zero."""
    return value.quantize(_QUANTUM, rounding=ROUND_HALF_UP, context=_EXACT)


def _percentage(numerator: Decimal, denominator: Decimal) -> Decimal:
    ratio = _DECIMAL128.divide(numerator, denominator)
    return round_amount(_EXACT.multiply(ratio, _HUNDRED))


def current_value(quantity: Decimal, current_price: Decimal) -> Decimal:
    return round_amount(_EXACT.multiply(quantity, current_price))


def invested_value(quantity: Decimal, purchase_price: Decimal) -> Decimal:
    return round_amount(_EXACT.multiply(quantity, purchase_price))


def roi(quantity: Decimal, purchase_price: Decimal, current_price: Decimal) -> Decimal:
    """Return on investment as a percentage.

    ROI = (current_value - invested_value) / invested_value * 100

    A zero invested value (purchase price of zero) yields ZERO rather than
    raising; positivity is enforced at the boundary, not here.
    """
    invested = invested_value(quantity, purchase_price)
    if invested.is_zero():
        return ZERO
    gain = _EXACT.subtract(current_value(quantity, current_price), invested)
    return _percentage(gain, invested)


def portfolio_share(holding_value: Decimal, total_current_value: Decimal) -> Decimal:
    """A holding's value as a percentage of the collection total.

    Returns ZERO when the total is zero (empty collection).
    """
    if total_current_value.is_zero():
        return ZERO
    return _percentage(holding_value, total_current_value)


def total(values: Iterable[Decimal]) -> Decimal:
    """Exact sum of already-rounded figures, rounded once at the end."""
    acc = Decimal(0)
    for value in values:
        acc = _EXACT.add(acc, value)
    return round_amount(acc)


def mean(values: list[Decimal]) -> Decimal:
    """Unweighted arithmetic mean rounded to 4 places; ZERO for no values."""
    if not values:
        return ZERO
    acc = Decimal(0)
    for value in values:
        acc = _EXACT.add(acc, value)
    # Exact integer division in units of 0.0001 with a remainder, so the
    # half-up step is the only rounding applied.
    count = Decimal(len(values))
    units, remainder = _EXACT.divmod(acc.scaleb(SCALE, context=_EXACT), count)
    if _EXACT.multiply(remainder.copy_abs(), 2) >= count:
        units = _EXACT.add(units, -1 if remainder.is_signed() else 1)
    return round_amount(units.scaleb(-SCALE, context=_EXACT))


def profit(total_current_value: Decimal, total_invested_value: Decimal) -> Decimal:
    return round_amount(_EXACT.subtract(total_current_value, total_invested_value))
