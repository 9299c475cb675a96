"""
Money codec: exact conversion of currency values at the store boundary.

Prices are held in memory as :class:`decimal.Decimal` and persisted as
fixed-point values with two fractional digits.  The codec never rounds:
a value that cannot be represented exactly is rejected on the way in,
and a stored value that cannot be parsed is reported as corruption on
the way out.
"""
from decimal import Decimal, InvalidOperation

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator

from sitecms.exceptions import CorruptValueError, PrecisionError

PRECISION = 10
SCALE = 2

_QUANTUM = Decimal(1).scaleb(-SCALE)  # Decimal("0.01")


def encode(value) -> str | None:
    """
    Return the exact ``SCALE``-digit text for *value*, or None for None.

    Floats go through ``str()`` first so ``99.99`` means 99.99 and not
    its binary approximation.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise PrecisionError(f"Not a money value: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise PrecisionError(f"Not a money value: {value!r}") from exc
    if not amount.is_finite():
        raise PrecisionError(f"Not a finite money value: {value!r}")

    try:
        quantized = amount.quantize(_QUANTUM)
    except InvalidOperation as exc:
        raise PrecisionError(f"{value!r} is too large for a money value") from exc
    if quantized != amount:
        raise PrecisionError(
            f"{value!r} has more than {SCALE} fractional digits"
        )
    if len(quantized.as_tuple().digits) > PRECISION:
        raise PrecisionError(f"{value!r} has more than {PRECISION} digits")
    return format(quantized, "f")


def decode(text) -> Decimal | None:
    """Parse stored money *text* back into a Decimal (None stays None)."""
    if text is None:
        return None
    try:
        amount = Decimal(str(text).strip())
    except InvalidOperation as exc:
        raise CorruptValueError(f"Malformed stored money value: {text!r}") from exc
    if not amount.is_finite():
        raise CorruptValueError(f"Malformed stored money value: {text!r}")
    return amount


def to_decimal(value) -> Decimal | None:
    """Normalise *value* to the Decimal the store will hand back."""
    return decode(encode(value))


class Money(TypeDecorator):
    """
    Column type applying the codec on every bind and every fetch.

    PostgreSQL gets a real ``NUMERIC(10, 2)``.  SQLite has no exact
    decimal type, so the encoded text is stored verbatim instead.
    """

    impl = Numeric(PRECISION, SCALE, asdecimal=True)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(PRECISION + 2))
        return dialect.type_descriptor(Numeric(PRECISION, SCALE, asdecimal=True))

    def process_bind_param(self, value, dialect):
        text = encode(value)
        if text is None or dialect.name == "sqlite":
            return text
        return Decimal(text)

    def process_result_value(self, value, dialect):
        return decode(value)
