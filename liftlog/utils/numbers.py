from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int) -> float:
    """
    Round to `places` decimals with halves going away from zero.

    Goes through the shortest decimal repr of the float so 123.45 rounds
    to 123.5 rather than following its binary expansion.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_fixed(value: float, places: int) -> str:
    """
    Fixed-point string with half-up rounding, e.g. format_fixed(0, 1) == "0.0".
    """
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
