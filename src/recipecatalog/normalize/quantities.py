"""Quantity rounding, rendering and ingredient identity helpers."""

import math
import unicodedata
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Decimal places shown for scaled and consolidated quantities
DISPLAY_PLACES = 2

# Magnitudes outside [1e-7, 1e21) are printed in exponent form
_EXPONENT_MIN = -6
_EXPONENT_MAX = 21


def round_half_up(value: float, places: int = DISPLAY_PLACES) -> float:
    """
    Round a quantity half-up to a fixed number of decimal places.

    The float is read through its shortest repr, so 1.005 rounds to 1.01
    rather than falling to 1.0 on its binary expansion. Non-finite values
    and values with no digits past `places` are returned unchanged.
    """
    value = float(value)
    if not math.isfinite(value):
        return value

    exact = Decimal(repr(value))
    if exact.as_tuple().exponent >= -places:
        return value

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return float(exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def format_quantity(value: float) -> str:
    """
    Render a quantity the way a JavaScript number prints.

    Examples:
        3.0 -> "3"
        1.50 -> "1.5"
        0.33 -> "0.33"
        1e-07 -> "1e-7"
        1e+21 -> "1e+21"
    """
    value = float(value)
    if not math.isfinite(value):
        return "NaN" if math.isnan(value) else ("Infinity" if value > 0 else "-Infinity")
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    exact = Decimal(repr(abs(value))).normalize()
    _, digit_tuple, exponent = exact.as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    # Position of the decimal point relative to the first digit
    point = len(digits) + exponent

    if len(digits) <= point <= _EXPONENT_MAX:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= _EXPONENT_MAX:
        text = f"{digits[:point]}.{digits[point:]}"
    elif _EXPONENT_MIN < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        power = point - 1
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"

    return sign + text


def normalize_name(name: str) -> str:
    """Lowercase and trim an ingredient name or unit for matching."""
    return name.strip().lower()


def consolidation_key(name: str, unit: str) -> str:
    """
    Build the merge identity of an ingredient.

    Two ingredients share a key iff their trimmed, lowercased name and unit
    are equal. The scalable flag is not part of the key.
    """
    return f"{normalize_name(name)}-{normalize_name(unit)}"


def name_sort_key(name: str) -> tuple[str, str, str]:
    """
    Sort key for case-insensitive, accent-aware ordering of names.

    Compares on the accent-stripped casefolded name first, then on accents,
    then puts lowercase before uppercase for otherwise equal names.
    """
    folded = unicodedata.normalize("NFKD", name.casefold())
    base = "".join(char for char in folded if not unicodedata.combining(char))
    return base, folded, name.swapcase()
