"""Decimal coercion and validation for monetary input."""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Any

from finance_engine.exceptions import InvalidAmountError

ZERO = Decimal("0")
CENT = Decimal("0.01")
HUNDRED = Decimal("100")


def to_decimal(value: Any, name: str = "amount") -> Decimal:
    """Coerce ``value`` to a finite Decimal.

    Floats go through ``str`` so 0.1 stays 0.1.

    Raises
    ------
    InvalidAmountError
        If the value is missing, unparsable, NaN or infinite.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError(f"{name} is required")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(f"{name} is not a number: {value!r}") from exc
    if not result.is_finite():
        raise InvalidAmountError(f"{name} must be finite, got {value!r}")
    return result


def non_negative(value: Any, name: str = "amount") -> Decimal:
    """Like :func:`to_decimal` but also rejects negative values."""
    result = to_decimal(value, name)
    if result < 0:
        raise InvalidAmountError(f"{name} must be >= 0, got {result}")
    return result


def positive(value: Any, name: str = "amount") -> Decimal:
    """Like :func:`to_decimal` but requires a value > 0."""
    result = to_decimal(value, name)
    if result <= 0:
        raise InvalidAmountError(f"{name} must be > 0, got {result}")
    return result


def cents(value: Decimal) -> Decimal:
    """Round to two decimal places, normalizing negative zero.

    Precision is widened as needed so that large balances keep every
    integer digit.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounded = value.quantize(CENT)
    return rounded if rounded != 0 else ZERO.quantize(CENT)
