"""Money parsing and formatting.

Amounts are always ``Decimal``; floats never enter the ledger, so a withdrawal of
exactly the whole balance compares equal and leaves ``0.00``.
"""

import re
from decimal import Decimal, Inexact, InvalidOperation, ROUND_HALF_UP, localcontext
from .exceptions import AmountParseError


CENTS = Decimal("0.01")

# plain numerals only: no exponents, no NaN/Infinity, no grouping separators
_NUMERAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")


def parse_amount(text: str) -> Decimal:
    """Parse user text into a Decimal, accepting ``,`` as the decimal separator.

    Raises AmountParseError for empty, blank or malformed input.
    """
    if text is None:
        raise AmountParseError()
    normalized = text.strip().replace(",", ".")
    if not _NUMERAL.fullmatch(normalized):
        raise AmountParseError()
    try:
        return Decimal(normalized)
    except InvalidOperation:
        raise AmountParseError()


def as_money(value) -> Decimal:
    """Round to two fractional digits."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(value) -> str:
    """``500`` -> ``"500.00"``"""
    return f"{as_money(value):.2f}"


def format_balance(value, symbol: str = "$") -> str:
    """``10000`` -> ``"$ 10,000.00"``"""
    return f"{symbol} {as_money(value):,.2f}"


def exact_subtract(minuend: Decimal, subtrahend: Decimal) -> Decimal:
    """``minuend - subtrahend`` with no rounding, whatever the number of digits."""
    lowest = min(minuend.as_tuple().exponent, subtrahend.as_tuple().exponent)
    highest = max(minuend.adjusted(), subtrahend.adjusted())
    with localcontext() as ctx:
        ctx.prec = max(highest - lowest + 2, ctx.prec)
        ctx.traps[Inexact] = True
        return minuend - subtrahend
