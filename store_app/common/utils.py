from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

_CENT = Decimal("0.01")


def normalise_space(text: Any) -> str:
    return " ".join(str(text or "").split())


def compute_discount_price(price: Decimal, discount_percent: Optional[Decimal]) -> Optional[Decimal]:
    """``price - price * discount_percent / 100`` rounded to cents."""

    if discount_percent is None:
        return None
    discounted = price - price * discount_percent / Decimal(100)
    return discounted.quantize(_CENT, rounding=ROUND_HALF_UP)
