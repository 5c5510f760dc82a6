# app/repositories/product_repo.py
import uuid

from sqlmodel import Session, select

from app.models.product import Category, Product


class ProductRepository:
    """
    Data access layer for Product & Category.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    # ----- Products -----

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        return session.get(Product, product_id)

    def list_products(
        self,
        session: Session,
        category_id: uuid.UUID | None = None,
    ) -> list[Product]:
        stmt = select(Product)
        if category_id is not None:
            stmt = stmt.where(Product.category == category_id)
        stmt = stmt.order_by(Product.created_at)
        return session.exec(stmt).all()

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    # ----- Categories -----

    def get_category_by_id(
        self,
        session: Session,
        category_id: uuid.UUID,
    ) -> Category | None:
        return session.get(Category, category_id)

    def list_categories(self, session: Session) -> list[Category]:
        stmt = select(Category).order_by(Category.created_at)
        return session.exec(stmt).all()

    def create_category(self, session: Session, category: Category) -> Category:
        session.add(category)
        session.commit()
        session.refresh(category)
        return category
