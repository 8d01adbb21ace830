"""Field rules for the Product entity.

Each field is checked on its own and every violation is collected, so a
client sees all problems with its payload in one response.
"""
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from .schemas import ProductIn

NAME_MIN, NAME_MAX = 2, 100
DESCRIPTION_MIN, DESCRIPTION_MAX = 5, 500
PRICE_MIN = Decimal("0.01")

BLANK = "must not be blank"
NULL = "must not be null"


def _check_text(value: Optional[str], min_len: int, max_len: int) -> List[str]:
    messages = []
    if value is None or not value.strip():
        messages.append(BLANK)
    # a null value has no size to check
    if value is not None and not min_len <= len(value) <= max_len:
        messages.append(f"size must be between {min_len} and {max_len}")
    return messages


def _check_price(value: Optional[Decimal]) -> List[str]:
    if value is None:
        return [NULL]
    if value < PRICE_MIN:
        return [f"must be greater than or equal to {PRICE_MIN}"]
    return []


def validate_product(candidate: ProductIn) -> Dict[str, List[str]]:
    """Return ``{field: [messages]}`` for every violated field; empty when valid."""
    checks = {
        "name": _check_text(candidate.name, NAME_MIN, NAME_MAX),
        "description": _check_text(candidate.description, DESCRIPTION_MIN, DESCRIPTION_MAX),
        "price": _check_price(candidate.price),
    }
    return {field: messages for field, messages in checks.items() if messages}


def validate_products(candidates: Sequence[ProductIn]) -> Dict[str, List[str]]:
    violations: Dict[str, List[str]] = {}
    for index, candidate in enumerate(candidates):
        for field, messages in validate_product(candidate).items():
            violations[f"{index}.{field}"] = messages
    return violations
