# backend/mittirang/schemas/product_schema.py
from datetime import datetime
from typing import Any, List, Optional, Union
from pydantic import BaseModel
from pydantic import ConfigDict


class ProductIn(BaseModel):
    """
    Admin form payload. Fields are deliberately untyped: prices and sizes
    arrive as numbers or strings and are coerced/validated by the pricing
    service so each failure maps to its own error code.
    """
    model_config = ConfigDict(extra="ignore")
    name: Any = None
    short_description: Any = None
    description: Any = None
    images: Any = None
    flipkart_link: Any = None
    amazon_link: Any = None
    price: Any = None
    sellingprice: Any = None
    sizes: Any = None


class DiscountOut(BaseModel):
    has: bool
    percent: int
    mrp: Optional[float] = None
    sellingprice: Optional[float] = None


class ProductOut(BaseModel):
    id: int
    name: str
    short_description: Optional[str] = None
    description: Optional[str] = None
    images: List[str]
    flipkart_link: Optional[str] = None
    amazon_link: Optional[str] = None
    price: Optional[float] = None
    sellingprice: Optional[float] = None
    sizes: List[Union[int, float]]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    discount: DiscountOut


class DashboardOut(BaseModel):
    total: int
    discounted: int
    items: List[ProductOut]
