from decimal import Decimal, DecimalException, InvalidOperation, ROUND_DOWN, localcontext
from enum import Enum
from typing import Dict, Union

# Enough digits for the largest denomination (10^39) applied twice, with headroom
MIN_PRECISION = 100


class Denomination(str, Enum):
    RAW = "raw"
    PRAI = "prai"  # draft
    URAI = "urai"
    MRAI = "mrai"
    RAI = "rai"
    KRAI = "krai"
    MEGA_RAI = "Mrai"
    GIGA_RAI = "Grai"
    TERA_RAI = "Trai"  # draft
    PETA_RAI = "Prai"  # draft


DENOMINATION_EXPONENTS: Dict[str, int] = {
    Denomination.RAW.value: 0,
    Denomination.PRAI.value: 15,
    Denomination.URAI.value: 18,
    Denomination.MRAI.value: 21,
    Denomination.RAI.value: 24,
    Denomination.KRAI.value: 27,
    Denomination.MEGA_RAI.value: 30,
    Denomination.GIGA_RAI.value: 33,
    Denomination.TERA_RAI.value: 36,
    Denomination.PETA_RAI.value: 39,
}

AmountLike = Union[int, str, Decimal]


def exponent_of(denomination: Union[Denomination, str, None]) -> int:
    """
    Returns the base-10 exponent of a denomination relative to raw.
    Unknown keys resolve to 0, so they behave like raw.
    Example: `exponent_of("Mrai") => 30`
    """
    if isinstance(denomination, Denomination):
        denomination = denomination.value
    return DENOMINATION_EXPONENTS.get(denomination, 0)


def to_decimal(amount: AmountLike) -> Decimal:
    """
    Parses an amount without going through binary floating point.
    Raises ValueError for anything that is not a finite base-10 numeral.
    """
    if isinstance(amount, bool) or isinstance(amount, float):
        raise ValueError(f"Amount must be an integer, a numeral string or a Decimal, got {amount!r}")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {amount!r}") from e
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")
    return value


def shift(amount: AmountLike, places: int) -> Decimal:
    """
    Moves the decimal point of an amount by `places` (positive multiplies).
    Example: `shift("1.5", 30) => Decimal('1.5E+30')`
    """
    value = to_decimal(amount)
    digits = len(value.as_tuple().digits)
    try:
        with localcontext() as ctx:
            ctx.prec = max(MIN_PRECISION, digits + abs(places) + 1)
            return value.scaleb(places)
    except DecimalException as e:
        raise ValueError(f"Amount out of range: {amount!r}") from e


def to_fixed(value: Decimal) -> str:
    """
    Renders a decimal with zero fractional digits, truncating toward zero.
    Example: `to_fixed(Decimal('-2.9')) => '-2'`
    """
    digits = len(value.as_tuple().digits)
    try:
        with localcontext() as ctx:
            ctx.prec = max(MIN_PRECISION, digits + max(value.as_tuple().exponent, 0) + 1)
            integral = value.quantize(Decimal(1), rounding=ROUND_DOWN)
    except DecimalException as e:
        raise ValueError(f"Amount out of range: {value!r}") from e
    if integral.is_zero():
        return "0"
    return f"{integral:f}"


def convert(
    amount: AmountLike,
    from_denomination: Union[Denomination, str] = Denomination.RAW,
    to_denomination: Union[Denomination, str] = Denomination.RAW,
) -> str:
    """
    Converts an amount between denominations using exact decimal arithmetic.
    Example: `convert(10**30, "raw", "Mrai") => '1'`
    """
    places = exponent_of(from_denomination) - exponent_of(to_denomination)
    return to_fixed(shift(amount, places))


def to_raw(amount: AmountLike, denomination: Union[Denomination, str]) -> str:
    return convert(amount, denomination, Denomination.RAW)


def from_raw(raw_amount: AmountLike, denomination: Union[Denomination, str]) -> str:
    return convert(raw_amount, Denomination.RAW, denomination)
