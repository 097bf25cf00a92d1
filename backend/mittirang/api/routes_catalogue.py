from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from sqlalchemy.orm import Session
from mittirang.db import get_db
from mittirang.schemas.product_schema import ProductOut
from mittirang.services.ordering import SortKey
from mittirang.services.product_service import ProductService, product_view

router = APIRouter(tags=["catalogue"])

@router.get("", summary="List products", response_model=List[ProductOut])
def list_products(
    q: Optional[str] = Query(None, description="search term (name or short description)"),
    sort: SortKey = Query(SortKey.NEWEST),
    limit: Optional[int] = Query(None, ge=1, le=200, description="home page uses a short list"),
    db: Session = Depends(get_db),
):
    svc = ProductService(db)
    return svc.list_catalogue(search=q, sort=sort, limit=limit)

@router.get("/{product_id}", summary="Get product by id", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    svc = ProductService(db)
    return product_view(svc.get(product_id))
