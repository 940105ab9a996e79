"""
Money Handling Module

Parses, rounds and formats monetary amounts. Every balance and amount is a
Decimal quantized to cents. NEVER uses float for monetary values.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext

# Set global decimal context for financial precision
getcontext().prec = 28

CENTS = Decimal('0.01')


class InvalidAmountError(ValueError):
    """Raised when user input is not a usable positive amount"""
    pass


def to_cents(value) -> Decimal:
    """
    Round a value to cent precision

    Args:
        value: Decimal, int or numeric string

    Returns:
        Decimal quantized to two fractional digits

    Precision grows with the value, so balances have no upper bound.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def add_amounts(a: Decimal, b: Decimal) -> Decimal:
    """Exact sum of two cent amounts of any size"""
    with localcontext() as ctx:
        # Integer digits of the larger operand, one carry digit, two cents
        ctx.prec = max(ctx.prec, max(a.adjusted(), b.adjusted()) + 4)
        return a + b


def decimal_from_string(value: str) -> Decimal:
    """
    Convert user-entered text to Decimal

    Surrounding whitespace, a leading currency symbol and thousands
    separators are accepted ("$1,250.50"). Anything else that Decimal
    cannot read, and NaN or infinity, is rejected.

    Args:
        value: String representation of number

    Returns:
        Decimal value

    Raises:
        InvalidAmountError: If string cannot be converted to a finite Decimal
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidAmountError("Value must be a non-empty string")

    clean_value = value.strip().replace(',', '')
    if clean_value.startswith('$'):
        clean_value = clean_value[1:]

    try:
        result = Decimal(clean_value)
    except InvalidOperation:
        raise InvalidAmountError(f"Cannot convert '{value}' to Decimal")

    if not result.is_finite():
        raise InvalidAmountError(f"'{value}' is not a finite number")
    return result


def parse_amount(value: str) -> Decimal:
    """
    Parse a credit or debit amount

    The amount is rounded to cents before the sign check, so "0.001"
    counts as zero and is rejected.

    Raises:
        InvalidAmountError: If the text is not a number or not strictly positive
    """
    amount = decimal_from_string(value)
    try:
        # Quantized in the 28-digit context, which bounds a single amount
        amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmountError(f"'{value}' is too large")

    if amount <= 0:
        raise InvalidAmountError("Amount must be a positive number")
    return amount


def format_amount(amount: Decimal, symbol: str = "$") -> str:
    """Format for display, e.g. $1150.00"""
    return f"{symbol}{to_cents(amount):.2f}"
