import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from mittirang.exceptions import ProductNotFound
from mittirang.models.product import Product
from mittirang.repositories.product_repo import ProductRepository
from mittirang.services.normalization import (
    decode_stored_list,
    normalize_images,
    normalize_sizes,
    to_number,
)
from mittirang.services.ordering import SortKey, catalogue_view
from mittirang.services.pricing import get_discount, validate_product
from mittirang.utils.transactions import write_transaction

logger = logging.getLogger(__name__)


def product_view(product: Product) -> Dict[str, Any]:
    """
    Read-path representation of a stored row. images/sizes are re-normalized
    because rows written by older code may hold JSON text or unsorted sizes.
    """
    discount = get_discount(product.price, product.sellingprice)
    return {
        "id": product.id,
        "name": product.name,
        "short_description": product.short_description,
        "description": product.description,
        "images": normalize_images(decode_stored_list(product.images)),
        "flipkart_link": product.flipkart_link,
        "amazon_link": product.amazon_link,
        "price": to_number(product.price),
        "sellingprice": to_number(product.sellingprice),
        "sizes": normalize_sizes(decode_stored_list(product.sizes)),
        "created_at": product.created_at,
        "updated_at": product.updated_at,
        "discount": discount.as_dict(),
    }


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)

    def get(self, product_id: int) -> Product:
        p = self.repo.get(product_id)
        if not p:
            raise ProductNotFound(product_id)
        return p

    def create(self, payload: Any) -> Product:
        draft = validate_product(payload)
        with write_transaction(self.db, "create product"):
            p = self.repo.add(draft)
        logger.info("Created product id=%s name=%r", p.id, p.name)
        return p

    def update(self, product_id: int, payload: Any) -> Product:
        draft = validate_product(payload)
        with write_transaction(self.db, f"update product {product_id}"):
            p = self.get(product_id)
            self.repo.replace(p, draft)
        logger.info("Updated product id=%s", product_id)
        return p

    def delete(self, product_id: int) -> None:
        with write_transaction(self.db, f"delete product {product_id}"):
            p = self.get(product_id)
            self.repo.delete(p)
        logger.info("Deleted product id=%s", product_id)

    def list_catalogue(
        self,
        search: Optional[str] = None,
        sort: Any = SortKey.NEWEST,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        views = [product_view(p) for p in self.repo.list_all()]
        return catalogue_view(views, sort_key=sort, search=search, limit=limit)

    def dashboard_summary(self) -> Dict[str, Any]:
        items = self.list_catalogue(sort=SortKey.NEWEST)
        return {
            "total": len(items),
            "discounted": sum(1 for it in items if it["discount"]["has"]),
            "items": items,
        }
