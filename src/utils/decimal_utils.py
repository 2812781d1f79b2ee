"""Helpers for numeric normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_float(value) -> float:
    """Normalize numeric values (Decimal, str, None) to float.

    Args:
        value: Raw numeric value from SQL, JSON or adapters.

    Returns:
        float: Normalized value, 0.0 for None.
    """
    return float(coerce_decimal(value))


__all__ = ["coerce_decimal", "coerce_float"]
