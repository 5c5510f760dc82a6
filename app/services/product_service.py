# app/services/product_service.py
import uuid

from sqlmodel import Session

from app.core.errors import NotFoundError, ValidationError, persistence_guard
from app.models.product import Category, Product
from app.repositories.product_repo import ProductRepository
from app.repositories.resolver import ReferenceResolver
from app.schemas.product import CategoryCreate, ProductCreate, ProductDetail


class ProductService:
    """
    Business logic for Product & Category.

    Responsibilities:
      - validation beyond pydantic (category must exist, id parsing)
      - embedding the category in product read models
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    # ----- Categories -----

    def list_categories(self, session: Session) -> list[Category]:
        return self.repo.list_categories(session)

    def get_category(self, session: Session, category_id: uuid.UUID) -> Category:
        category = self.repo.get_category_by_id(session, category_id)
        if not category:
            raise NotFoundError("Category not found")
        return category

    def create_category(self, session: Session, payload: CategoryCreate) -> Category:
        category = Category(
            name=payload.name,
            description=payload.description or "",
        )
        with persistence_guard(session, "Failed to create category"):
            return self.repo.create_category(session, category)

    # ----- Products -----

    def list_products(
        self,
        session: Session,
        category: str | None = None,
    ) -> list[ProductDetail]:
        """
        List products, optionally filtered by category id.

        Raises:
            ValidationError: if `category` is given but is not a valid id.
        """
        category_id = None
        if category:
            try:
                category_id = uuid.UUID(category)
            except ValueError:
                raise ValidationError("Invalid category ID")

        products = self.repo.list_products(session, category_id=category_id)
        docs = ReferenceResolver(session).expand_many(products, {"category": Category})
        return [ProductDetail.model_validate(doc) for doc in docs]

    def get_product(self, session: Session, product_id: uuid.UUID) -> ProductDetail:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise NotFoundError("Product not found")
        doc = ReferenceResolver(session).expand(product, {"category": Category})
        return ProductDetail.model_validate(doc)

    def create_product(self, session: Session, payload: ProductCreate) -> Product:
        """
        Create a new product.

        - The referenced category must exist (404 otherwise).
        """
        self.get_category(session, payload.category)

        product = Product(
            title=payload.title,
            description=payload.description,
            price=payload.price,
            image=payload.image,
            artist=payload.artist,
            dimensions=payload.dimensions,
            material=payload.material,
            category=payload.category,
            stock=payload.stock,
            tags=list(payload.tags),
        )
        with persistence_guard(session, "Failed to create product"):
            return self.repo.create(session, product)
