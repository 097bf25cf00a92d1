import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, List, Optional

from mittirang.services.normalization import read_field, to_number
from mittirang.services.pricing import effective_price, get_discount


class SortKey(str, Enum):
    NEWEST = "newest"
    PRICE_LOW = "priceLow"
    PRICE_HIGH = "priceHigh"
    DISCOUNT = "discount"


def parse_sort_key(value: Any) -> SortKey:
    try:
        return SortKey(value)
    except ValueError:
        return SortKey.NEWEST


def _timestamp(value: Any) -> Optional[float]:
    if isinstance(value, str):
        s = value.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(s)
        except ValueError:
            return None
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        # the store writes UTC without an offset
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def _text(record: Any, name: str) -> str:
    v = read_field(record, name)
    return v.lower() if isinstance(v, str) else ""


def filter_products(products: Iterable[Any], search: Optional[str] = None) -> List[Any]:
    q = search.strip().lower() if isinstance(search, str) else ""
    if not q:
        return list(products)
    return [
        p for p in products if q in _text(p, "name") or q in _text(p, "short_description")
    ]


def _newest_key(record: Any):
    ts = _timestamp(read_field(record, "created_at"))
    if ts is not None:
        return (1, ts, 0.0)
    return (0, 0.0, to_number(read_field(record, "id")) or 0.0)


def _price_low_key(record: Any) -> float:
    price = effective_price(record)
    return math.inf if price is None else price


def _price_high_key(record: Any) -> float:
    price = effective_price(record)
    return -math.inf if price is None else price


def _discount_key(record: Any) -> int:
    return get_discount(read_field(record, "price"), read_field(record, "sellingprice")).percent


def sort_products(products: Iterable[Any], sort_key: Any = SortKey.NEWEST) -> List[Any]:
    """
    Return a new, stably sorted list; the input is left untouched.
    Equal keys keep their input order (sorted() stays stable with reverse=True).
    """
    key = parse_sort_key(sort_key)
    items = list(products)
    if key is SortKey.PRICE_LOW:
        return sorted(items, key=_price_low_key)
    if key is SortKey.PRICE_HIGH:
        return sorted(items, key=_price_high_key, reverse=True)
    if key is SortKey.DISCOUNT:
        return sorted(items, key=_discount_key, reverse=True)
    return sorted(items, key=_newest_key, reverse=True)


def catalogue_view(
    products: Iterable[Any],
    sort_key: Any = SortKey.NEWEST,
    search: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[Any]:
    result = sort_products(filter_products(products, search), sort_key)
    if limit is not None and limit >= 0:
        result = result[:limit]
    return result
