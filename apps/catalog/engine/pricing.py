"""
Selling price arithmetic for the combination table.

All amounts are Decimal. Nothing here clamps its inputs: a negative offer
yields a selling price above MRP, an offer above 100 yields a negative one.
"""
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_DOWN,
    ROUND_HALF_UP,
    Decimal,
    InvalidOperation,
    getcontext,
    localcontext,
)

from apps.catalog.exceptions import InvalidAmount


TWO_PLACES = Decimal('0.01')


def to_decimal(value):
    """
    Read a form value as a finite Decimal.

    Blank strings read as zero, the way a cleared number input does.
    Booleans, non-numeric text, NaN and infinities raise InvalidAmount.
    """
    if isinstance(value, bool):
        raise InvalidAmount(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return Decimal('0')
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise InvalidAmount(f"Not a number: {value!r}") from None
    else:
        raise InvalidAmount(f"Not a number: {value!r}")

    if not amount.is_finite():
        raise InvalidAmount(f"Not a finite number: {value!r}")
    return amount


def _wide_context(*amounts):
    """A context with enough digits to carry ``amounts`` to cents exactly."""
    integer_digits = sum(max(amount.adjusted(), 0) + 1 for amount in amounts)
    context = getcontext().copy()
    context.prec = max(context.prec, integer_digits + 30)
    context.Emax = MAX_EMAX
    context.Emin = MIN_EMIN
    return localcontext(context)


def round_cents(amount):
    """
    Round to 2 places with halves going up, towards positive infinity.

    -0.005 rounds to -0.00 and 0.005 to 0.01.
    """
    rounding = ROUND_HALF_UP if amount >= 0 else ROUND_HALF_DOWN
    with _wide_context(amount):
        return amount.quantize(TWO_PLACES, rounding=rounding)


def selling_price(mrp, offer_percent):
    """Return ``mrp - mrp * offer_percent / 100`` rounded to 2 places."""
    mrp = to_decimal(mrp)
    offer_percent = to_decimal(offer_percent)
    with _wide_context(mrp, offer_percent):
        price = mrp - mrp * offer_percent / 100
    return round_cents(price)


def savings(mrp, offer_percent):
    """Amount knocked off MRP by the offer, to 2 places."""
    mrp = to_decimal(mrp)
    price = selling_price(mrp, offer_percent)
    with _wide_context(mrp, price):
        saved = mrp - price
    return round_cents(saved)
