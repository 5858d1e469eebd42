"""Conversion between human-readable token amounts and base units."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext

from tokamak_mcp.errors import InvalidAmount

# Enough significant digits for any uint256 amount
_PRECISION = 80


def parse_units(amount: str, decimals: int) -> int:
    """Convert "1.5" with 18 decimals to 1500000000000000000.

    Raises:
        InvalidAmount: not a number, negative, or more fractional digits than
            ``decimals`` allows.
    """
    text = str(amount).strip()
    if not text:
        raise InvalidAmount(text, "amount is empty")
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise InvalidAmount(text, "not a number") from None
    if not value.is_finite():
        raise InvalidAmount(text, "not a number")
    if value < 0:
        raise InvalidAmount(text, "amount must not be negative")

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        scaled = value.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise InvalidAmount(text, f"too many decimal places (max {decimals})")
    return int(scaled)


def format_units(value: int, decimals: int) -> str:
    """Convert base units back to a decimal string without trailing zeros."""
    negative = value < 0
    whole, frac = divmod(abs(value), 10**decimals)
    text = str(whole)
    if decimals and frac:
        text += "." + str(frac).rjust(decimals, "0").rstrip("0")
    return f"-{text}" if negative else text
