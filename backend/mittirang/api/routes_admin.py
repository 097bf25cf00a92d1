from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from mittirang.api.deps import require_admin
from mittirang.db import get_db
from mittirang.schemas.product_schema import DashboardOut, ProductIn, ProductOut
from mittirang.services.product_service import ProductService, product_view

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/products", summary="Dashboard listing", response_model=DashboardOut)
def dashboard(db: Session = Depends(get_db)):
    svc = ProductService(db)
    return svc.dashboard_summary()


@router.post(
    "/products",
    summary="Add a product",
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    svc = ProductService(db)
    p = svc.create(payload.model_dump())
    return product_view(p)


@router.put("/products/{product_id}", summary="Replace a product", response_model=ProductOut)
def update_product(product_id: int, payload: ProductIn, db: Session = Depends(get_db)):
    svc = ProductService(db)
    p = svc.update(product_id, payload.model_dump())
    return product_view(p)


@router.delete(
    "/products/{product_id}",
    summary="Delete a product",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    svc = ProductService(db)
    svc.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
