"""
Price derivation and payment amount validation.
"""
from .calculator import yearly_price
from .validation import AMOUNT_TOLERANCE, expected_amount, is_valid_amount

__all__ = [
    "AMOUNT_TOLERANCE",
    "expected_amount",
    "is_valid_amount",
    "yearly_price",
]
