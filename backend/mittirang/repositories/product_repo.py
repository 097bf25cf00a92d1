from typing import List, Optional

from mittirang.models.product import Product
from mittirang.services.pricing import ProductDraft
from sqlalchemy.orm import Session


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def list_all(self) -> List[Product]:
        """
        Return every product in insertion order; search and ordering are done
        in Python so legacy rows with odd stored values still sort sanely.
        """
        return self.db.query(Product).order_by(Product.id).all()

    def add(self, draft: ProductDraft) -> Product:
        p = Product(**draft.as_dict())
        self.db.add(p)
        self.db.flush()
        return p

    def replace(self, product: Product, draft: ProductDraft) -> Product:
        # full-record update: every editable column is overwritten
        for name, value in draft.as_dict().items():
            setattr(product, name, value)
        self.db.flush()
        return product

    def delete(self, product: Product) -> None:
        self.db.delete(product)
        self.db.flush()
