"""Decimal rounding helpers."""

from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_half_up(value: float, precision: int = 0) -> float:
    """
    Round to `precision` decimal places, ties away from zero.

    The built-in round() uses banker's rounding and works on the binary value,
    so round(2.675, 2) gives 2.67. This rounds the shortest decimal repr of
    the float instead, giving 2.68.

    Any precision is accepted; past the digits a float carries the value
    comes back unchanged.

    Example:
        >>> round_half_up(2.9145, 3)
        2.915
        >>> round_half_up(-0.5)
        -1.0
    """
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Integer digits plus the requested decimals must fit
        ctx.prec = max(ctx.prec, exact.adjusted() + precision + 2)
        quantum = Decimal(1).scaleb(-precision)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))
