"""Floor division on integers.

The calendar formulas in Meeus' "Astronomical Algorithms" use an INT()
function that must round toward negative infinity for negative years.
These helpers do that with integer arithmetic only.
"""

from operator import index as _index


def floor_div(x: int, y: int) -> int:
    """Return floor(x / y) using integer math only.

    Args:
        x: Dividend
        y: Divisor, must not be zero

    Returns:
        int: The quotient rounded toward negative infinity

    Raises:
        ZeroDivisionError: If y is zero
        TypeError: If x or y is not an integer
    """
    x = _index(x)
    y = _index(y)
    if y == 0:
        raise ZeroDivisionError("floor_div: divisor must not be zero")

    # Truncating quotient first, then step down when signs differ
    q = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        q = -q
        if x % y != 0:
            q -= 1
    return q


# Python integers do not overflow, so the wide variant is the same function.
floor_div64 = floor_div
