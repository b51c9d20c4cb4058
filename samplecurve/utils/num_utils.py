import math
from numbers import Real


def is_real_number(value) -> bool:
    """Check if a value is a real number. Booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    return isinstance(value, Real)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    k = math.floor(value)
    # value + 0.5 can round up across an integer just below a tie
    return k + 1 if value - k >= 0.5 else k
