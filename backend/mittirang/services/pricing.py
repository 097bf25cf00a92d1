from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional

from mittirang.errors import ErrorType
from mittirang.exceptions import ProductValidationError
from mittirang.services.normalization import (
    Number,
    normalize_images,
    normalize_sizes,
    read_field,
    to_number,
)


@dataclass(frozen=True)
class DiscountView:
    has: bool
    percent: int
    mrp: Optional[float]
    sellingprice: Optional[float]

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def discount_percent(mrp: float, sellingprice: float) -> int:
    """(mrp - sp) / mrp * 100, rounded half-up in decimal arithmetic."""
    m = Decimal(repr(mrp))
    s = Decimal(repr(sellingprice))
    pct = (m - s) / m * 100
    return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def get_discount(price: Any, sellingprice: Any) -> DiscountView:
    """
    Display-side discount. Never raises: anything that does not describe a
    real markdown (missing/negative selling price, sp >= mrp, garbage) is
    reported as "no discount" and the MRP is shown alone.
    """
    mrp = to_number(price)
    sp = to_number(sellingprice)
    if mrp is None or sp is None or sp < 0 or mrp <= sp:
        return DiscountView(has=False, percent=0, mrp=mrp, sellingprice=sp)
    return DiscountView(
        has=True, percent=discount_percent(mrp, sp), mrp=mrp, sellingprice=sp
    )


def effective_price(record: Any) -> Optional[float]:
    """Price the customer pays: selling price when set, else MRP."""
    sp = to_number(read_field(record, "sellingprice"))
    if sp is not None:
        return sp
    return to_number(read_field(record, "price"))


@dataclass
class ProductDraft:
    """A validated, normalized create/update payload ready for storage."""

    name: str
    price: float
    sellingprice: Optional[float] = None
    short_description: Optional[str] = None
    description: Optional[str] = None
    flipkart_link: Optional[str] = None
    amazon_link: Optional[str] = None
    images: List[str] = field(default_factory=list)
    sizes: List[Number] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _optional_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def validate_product(payload: Any) -> ProductDraft:
    """
    Strict write-path check. Raises ProductValidationError with one of
    MISSING_NAME, INVALID_PRICE or INVALID_SELLING_PRICE; checks run in
    that order.
    """
    if not isinstance(payload, Mapping):
        payload = {}

    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ProductValidationError(ErrorType.MISSING_NAME, "Name is required")

    price = to_number(payload.get("price"))
    if price is None:
        raise ProductValidationError(ErrorType.INVALID_PRICE, "Valid price is required")
    if price < 0:
        raise ProductValidationError(
            ErrorType.INVALID_PRICE, "Prices must be non-negative."
        )

    sellingprice = None
    raw_sp = payload.get("sellingprice")
    if not _is_blank(raw_sp):
        sellingprice = to_number(raw_sp)
        if sellingprice is None:
            raise ProductValidationError(
                ErrorType.INVALID_SELLING_PRICE, "Valid selling price is required"
            )
        if sellingprice < 0:
            raise ProductValidationError(
                ErrorType.INVALID_SELLING_PRICE, "Prices must be non-negative."
            )
        if sellingprice >= price:
            raise ProductValidationError(
                ErrorType.INVALID_SELLING_PRICE, "Selling price must be less than MRP."
            )

    return ProductDraft(
        name=name.strip(),
        price=price,
        sellingprice=sellingprice,
        short_description=_optional_text(payload.get("short_description")),
        description=_optional_text(payload.get("description")),
        flipkart_link=_optional_text(payload.get("flipkart_link")),
        amazon_link=_optional_text(payload.get("amazon_link")),
        images=normalize_images(payload.get("images")),
        sizes=normalize_sizes(payload.get("sizes")),
    )
