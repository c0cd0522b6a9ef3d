"""
WooCommerce pricing proxy: fronts the upstream pricing source, normalizes its
records and validates client payment amounts.
"""

__version__ = "1.0.0"
