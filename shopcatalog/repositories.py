"""SQLAlchemy-backed adapters and repositories for categories and products."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from shopcatalog.categories import Category, CategoryId, CategoryName
from shopcatalog.dbmodels import CategoryModel, ProductModel
from shopcatalog.errors import DomainError, InternalError, NotFoundError
from shopcatalog.ports import (
    CategoryAdapter,
    CategoryRepository,
    ProductAdapter,
    ProductRepository,
)
from shopcatalog.products import Product, ProductId, ProductName, ProductPrice


class SqlCategoryAdapter(CategoryAdapter[CategoryModel]):
    """Converts categories to and from category rows."""

    def convert(self, source: Category | None) -> CategoryModel:
        if source is None:
            raise DomainError("引数がnilのため、CategoryModelへの変換ができません。")
        name = source.name.value if source.name is not None else None
        return CategoryModel(obj_id=source.id.value, name=name)

    def restore(self, source: CategoryModel | None) -> Category:
        if source is None:
            raise DomainError("引数がnilのため、Categoryを復元できません。")
        return Category(CategoryId(source.obj_id), CategoryName(source.name))


class SqlProductAdapter(ProductAdapter[ProductModel]):
    """Converts products to and from product rows."""

    def __init__(self, category_adapter: CategoryAdapter[CategoryModel]) -> None:
        self._category_adapter = category_adapter

    def convert(self, source: Product | None) -> ProductModel:
        if source is None:
            raise DomainError("引数がnilのため、ProductModelに変換できません。")
        return ProductModel(
            obj_id=source.id.value,
            name=source.name.value,
            price=source.price.value,
            category_id=source.category.id.value,
        )

    def restore(self, source: ProductModel | None) -> Product:
        if source is None:
            raise DomainError("引数がnilのため、Productを復元できません。")
        product_id = ProductId(source.obj_id)
        name = ProductName(source.name)
        price = ProductPrice(source.price)
        category = self._category_adapter.restore(source.category)
        return Product(product_id, name, price, category)


class SqlCategoryRepository(CategoryRepository[Session]):
    """Reads categories from the database."""

    def __init__(self, adapter: CategoryAdapter[CategoryModel]) -> None:
        self._adapter = adapter

    def find_all(self, session: Session) -> list[Category]:
        try:
            models = session.scalars(select(CategoryModel).order_by(CategoryModel.id)).all()
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc
        try:
            return [self._adapter.restore(model) for model in models]
        except DomainError as exc:
            raise InternalError(str(exc)) from exc


class SqlProductRepository(ProductRepository[Session]):
    """Reads and stores products in the database."""

    def __init__(self, adapter: ProductAdapter[ProductModel]) -> None:
        self._adapter = adapter

    def exists(self, session: Session, name: ProductName) -> bool:
        statement = select(ProductModel.id).where(ProductModel.name == name.value).limit(1)
        try:
            return session.scalars(statement).first() is not None
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc

    def create(self, session: Session, product: Product) -> None:
        model = self._adapter.convert(product)
        try:
            session.add(model)
            session.flush()
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc

    def find_by_name_like(self, session: Session, keyword: str) -> list[Product]:
        statement = (
            select(ProductModel)
            .options(selectinload(ProductModel.category))
            .where(ProductModel.name.like(f"%{keyword}%"))
            .order_by(ProductModel.id)
        )
        try:
            models = session.scalars(statement).all()
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc
        if not models:
            raise NotFoundError(f"キーワード:'{keyword}'に該当する商品は見つかりませんでした。")
        try:
            return [self._adapter.restore(model) for model in models]
        except DomainError as exc:
            raise InternalError(str(exc)) from exc