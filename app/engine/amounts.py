"""
Currency amount conversion.

The billing platform works in minor currency units (cents). Amounts arrive
from the form in major units and are converted exactly, via Decimal, so that
values like 19.99 never pick up binary floating point error.

Rounding uses ROUND_HALF_EVEN to a whole number of minor units.
"""
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Union

MINOR_UNITS_PER_MAJOR = Decimal("100")
WHOLE = Decimal("1")


def to_minor_units(amount: Union[Decimal, float, int, str]) -> int:
    """
    Convert a major-unit amount to integer minor units.

    Examples:
        19.99  -> 1999
        0.125  -> 12   (tie rounds to even)
        0.135  -> 14
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return int((value * MINOR_UNITS_PER_MAJOR).quantize(WHOLE, rounding=ROUND_HALF_EVEN))
