"""
Core math modules

Конверсии minor units ↔ десятичные значения и курс → цена
с банковским округлением.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    SUPPORTED_DECIMAL_PLACES,
    is_valid_float,
    validate_decimal_places,
    validate_rate,
)

# Decimal Codec
from src.core.math.decimal_codec import (
    CENT_MULT,
    to_decimal,
    to_minor_units,
)

# Price Rounding
from src.core.math.price_rounding import (
    PRICE_SCALE,
    rate_to_price,
    round_price,
)

__all__ = [
    # Numerical Safeguards
    "SUPPORTED_DECIMAL_PLACES",
    "is_valid_float",
    "validate_decimal_places",
    "validate_rate",
    # Decimal Codec
    "CENT_MULT",
    "to_decimal",
    "to_minor_units",
    # Price Rounding
    "PRICE_SCALE",
    "rate_to_price",
    "round_price",
]
