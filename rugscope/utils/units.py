"""Raw integer token amounts <-> human-readable decimal strings.

Integer arithmetic only: token supplies routinely exceed 2**53, so the
conversion itself must never pass through float. Callers may turn the
resulting string into a float for display math.
"""

from decimal import Decimal, InvalidOperation


def to_decimal_string(raw_amount: int, decimals: int) -> str:
    """Shift ``raw_amount`` left by ``decimals`` digits.

    Trailing fractional zeros are dropped but at least one fractional digit
    is kept, so ``to_decimal_string(10**18, 18) == "1.0"`` and
    ``to_decimal_string(2_500_000, 6) == "2.5"``.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")

    sign = "-" if raw_amount < 0 else ""
    whole, frac = divmod(abs(int(raw_amount)), 10**decimals)
    frac_str = str(frac).rjust(decimals, "0").rstrip("0") if decimals else ""
    return f"{sign}{whole}.{frac_str or '0'}"


def parse_units(value: str, decimals: int) -> int:
    """Inverse of :func:`to_decimal_string`: ``"2.5"`` with 6 decimals -> 2500000.

    Raises ValueError when ``value`` is not a plain decimal number or carries
    more significant fractional digits than ``decimals`` allows.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")

    text = value.strip()
    negative = text.startswith("-")
    if negative or text.startswith("+"):
        text = text[1:]

    whole, _, frac = text.partition(".")
    if not whole:
        whole = "0"
    if not whole.isdigit() or (frac and not frac.isdigit()):
        raise ValueError(f"Invalid decimal amount: {value!r}")

    frac = frac.rstrip("0")
    if len(frac) > decimals:
        raise ValueError(f"{value!r} has more than {decimals} fractional digits")

    raw = int(whole) * 10**decimals + int(frac.ljust(decimals, "0") or "0")
    return -raw if negative else raw


def parse_raw_amount(value: object) -> int:
    """Parse an explorer quantity field into a raw integer.

    Explorer rows are strings; thousands separators and stray ``%`` signs are
    dropped. Unparseable values degrade to 0.
    """
    if isinstance(value, int):
        return value
    text = str(value or "").replace(",", "").replace("%", "").strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(Decimal(text))
    except (InvalidOperation, OverflowError, ValueError):
        return 0
