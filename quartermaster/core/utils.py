from decimal import Decimal, InvalidOperation
from quartermaster.core.exceptions import MissingFieldError, InvalidFieldError

# Column limits: Integer is 32-bit, unit_price is Numeric(10, 2)
MAX_QUANTITY = 2**31 - 1
MAX_PRICE = Decimal("99999999.99")


def require_fields(**fields):
    """Raises MissingFieldError naming every field that is None or blank."""
    missing = [
        name for name, value in fields.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise MissingFieldError(f"Required fields are missing: {', '.join(missing)}.")


def clean_text(name, value):
    if not isinstance(value, str):
        raise InvalidFieldError(f"'{name}' must be a string.")
    return value.strip()


def clean_price(value):
    if isinstance(value, bool):
        raise InvalidFieldError("'unit_price' must be a number.")
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        raise InvalidFieldError("'unit_price' must be a number.")
    if not price.is_finite() or price < 0:
        raise InvalidFieldError("'unit_price' must be a non-negative number.")
    if price > MAX_PRICE:
        raise InvalidFieldError(f"'unit_price' cannot exceed {MAX_PRICE}.")
    return price


def clean_quantity(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError("'available_quantity' must be an integer.")
    if value < 0:
        raise InvalidFieldError("'available_quantity' cannot be negative.")
    if value > MAX_QUANTITY:
        raise InvalidFieldError(f"'available_quantity' cannot exceed {MAX_QUANTITY}.")
    return value
