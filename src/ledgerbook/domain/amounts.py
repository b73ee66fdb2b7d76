"""Money amount normalization shared by journal lines and inventory figures.

Amounts are fixed-point decimals with four places after the point, the
precision every storage backend keeps exactly.
"""

from decimal import Decimal, InvalidOperation

from ledgerbook.domain.errors import ValidationError

AMOUNT_SCALE = 4
AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_SCALE)

# Largest magnitude representable as NUMERIC(18, 4)
MAX_AMOUNT = Decimal("99999999999999.9999")


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Convert a money value to Decimal.

    Floats go through their shortest string form so 0.1 stays 0.1.

    Raises:
        ValidationError: If the value is not a finite number, has more than
            AMOUNT_SCALE decimal places, or exceeds MAX_AMOUNT
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid amount: {value!r}")
    try:
        if isinstance(value, float):
            amount = Decimal(str(value))
        else:
            amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"Invalid amount: {value!r}")
    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    if abs(amount) > MAX_AMOUNT:
        raise ValidationError(f"Amount {amount} exceeds the maximum of {MAX_AMOUNT}")
    if amount != amount.quantize(AMOUNT_QUANTUM):
        raise ValidationError(
            f"Amount {amount} has more than {AMOUNT_SCALE} decimal places"
        )
    return amount
