# product_api/schemas.py
from decimal import Decimal
from pydantic import BaseModel
from typing import Optional


class ProductIn(BaseModel):
    # Everything is optional here: missing values are reported by
    # validate_product together with the other violations.
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None


class ProductOut(BaseModel):
    id: int
    name: str
    description: str
    price: float

    class Config:
        from_attributes = True
