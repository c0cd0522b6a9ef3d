"""Yearly price derivation."""

MONTHS_PER_YEAR = 12


def yearly_price(monthly: float, discount_percentage: int) -> float:
    """Twelve months of ``monthly`` with the discount applied, rounded to cents.

    The discount is not clamped: values above 100 give a negative price and
    negative values inflate it.
    """
    return round(monthly * MONTHS_PER_YEAR * (1 - discount_percentage / 100), 2)
