# app/routers/products.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.database import get_session
from app.repositories.product_repo import ProductRepository
from app.schemas.product import (
    CategoryCreate,
    CategoryDetailResponse,
    CategoryRead,
    CategoryResponse,
    ProductCreate,
    ProductDetailResponse,
    ProductListResponse,
    ProductRead,
    ProductResponse,
)
from app.services.product_service import ProductService

router = APIRouter(tags=["Catalog"])

repo = ProductRepository()
service = ProductService(repo)


# -------- Products --------


@router.post(
    "/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new product.

    - title, price and category are required.
    - 404 if the category does not exist.
    """
    product = service.create_product(session, payload)
    return ProductResponse(
        message="Product created successfully",
        product=ProductRead.model_validate(product),
    )


@router.get("/products", response_model=ProductListResponse)
def list_products(
    category: str | None = None,
    session: Session = Depends(get_session),
):
    """
    List products with their category embedded.

    - `?category=<id>` filters by category; a malformed id is a 400.
    """
    products = service.list_products(session, category=category)
    return {"message": "Products fetched", "data": {"products": products}}


@router.get("/products/{product_id}", response_model=ProductDetailResponse)
def get_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a single product by id, category embedded.
    """
    product = service.get_product(session, product_id)
    return {"message": "Product fetched", "data": {"product": product}}


# -------- Categories --------


@router.post(
    "/categories",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    payload: CategoryCreate,
    session: Session = Depends(get_session),
):
    category = service.create_category(session, payload)
    return CategoryResponse(
        message="Category created",
        category=CategoryRead.model_validate(category),
    )


@router.get("/categories", response_model=list[CategoryRead])
def list_categories(session: Session = Depends(get_session)):
    """
    List all categories (bare JSON array).
    """
    return [CategoryRead.model_validate(c) for c in service.list_categories(session)]


@router.get("/categories/{category_id}", response_model=CategoryDetailResponse)
def get_category(
    category_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    category = service.get_category(session, category_id)
    return {
        "message": "Category fetched",
        "data": {"category": CategoryRead.model_validate(category)},
    }
