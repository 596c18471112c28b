import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from shopcatalog.categories import Category, CategoryId, CategoryName
from shopcatalog.dbmodels import Base, CategoryModel, ProductModel
from shopcatalog.errors import DomainError, InternalError, NotFoundError
from shopcatalog.products import Product, ProductId, ProductName, ProductPrice
from shopcatalog.repositories import (
    SqlCategoryAdapter,
    SqlCategoryRepository,
    SqlProductAdapter,
    SqlProductRepository,
)

STATIONERY_ID = "b1524011-b6af-417e-8bf2-f449dd58b5c0"
BALLPEN_ID = "ac413f22-0cf1-490a-9635-7e9ca810e544"


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(
            [
                CategoryModel(obj_id=STATIONERY_ID, name="文房具"),
                CategoryModel(obj_id="762bd1ea-9700-4bab-a28d-6cbebf20ddc2", name="雑貨"),
                CategoryModel(obj_id="c05b1952-3bdf-4449-9b83-d0d123a667ce", name="パソコン周辺機器"),
                ProductModel(obj_id=BALLPEN_ID, name="水性ボールペン(黒)", price=120, category_id=STATIONERY_ID),
                ProductModel(
                    obj_id="dc7243af-c2ce-4136-bd5d-c6b28ee0a20a",
                    name="蛍光ペン(黄)",
                    price=130,
                    category_id=STATIONERY_ID,
                ),
            ]
        )
        session.commit()
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def category_adapter():
    return SqlCategoryAdapter()


@pytest.fixture
def product_adapter(category_adapter):
    return SqlProductAdapter(category_adapter)


@pytest.fixture
def category_repo(category_adapter):
    return SqlCategoryRepository(category_adapter)


@pytest.fixture
def product_repo(product_adapter):
    return SqlProductRepository(product_adapter)


def _stationery():
    return Category(CategoryId(STATIONERY_ID), CategoryName("文房具"))


def _ballpen():
    return Product(ProductId(BALLPEN_ID), ProductName("ボールペン"), ProductPrice(200), _stationery())


def test_category_convert_none(category_adapter):
    with pytest.raises(DomainError) as info:
        category_adapter.convert(None)
    assert str(info.value) == "引数がnilのため、CategoryModelへの変換ができません。"


def test_category_convert_valid(category_adapter):
    result = category_adapter.convert(_stationery())
    assert result.id is None
    assert result.obj_id == STATIONERY_ID
    assert result.name == "文房具"


def test_category_restore_none(category_adapter):
    with pytest.raises(DomainError) as info:
        category_adapter.restore(None)
    assert str(info.value) == "引数がnilのため、Categoryを復元できません。"


def test_category_restore_valid(category_adapter):
    result = category_adapter.restore(CategoryModel(obj_id=STATIONERY_ID, name="文房具"))
    assert result == _stationery()
    assert result.name == CategoryName("文房具")


def test_product_convert_none(product_adapter):
    with pytest.raises(DomainError) as info:
        product_adapter.convert(None)
    assert str(info.value) == "引数がnilのため、ProductModelに変換できません。"


def test_product_convert_valid(product_adapter):
    result = product_adapter.convert(_ballpen())
    assert result.id is None
    assert result.obj_id == BALLPEN_ID
    assert result.name == "ボールペン"
    assert result.price == 200
    assert result.category_id == STATIONERY_ID


def test_product_restore_none(product_adapter):
    with pytest.raises(DomainError) as info:
        product_adapter.restore(None)
    assert str(info.value) == "引数がnilのため、Productを復元できません。"


def test_product_restore_valid(product_adapter):
    model = ProductModel(
        obj_id=BALLPEN_ID,
        name="ボールペン",
        price=200,
        category=CategoryModel(obj_id=STATIONERY_ID, name="文房具"),
    )
    result = product_adapter.restore(model)
    expected = _ballpen()
    assert result == expected
    assert result.name == expected.name
    assert result.price == expected.price
    assert result.category == expected.category
    assert result.category.name == CategoryName("文房具")


def test_product_restore_without_category(product_adapter):
    model = ProductModel(obj_id=BALLPEN_ID, name="ボールペン", price=200)
    with pytest.raises(DomainError) as info:
        product_adapter.restore(model)
    assert str(info.value) == "引数がnilのため、Categoryを復元できません。"


def test_find_all_returns_categories(session, category_repo):
    categories = category_repo.find_all(session)
    assert [c.name.value for c in categories] == ["文房具", "雑貨", "パソコン周辺機器"]
    assert categories[0].id == CategoryId(STATIONERY_ID)


def test_find_all_without_tables_raises_internal_error(engine, session, category_repo):
    Base.metadata.drop_all(engine)
    with pytest.raises(InternalError):
        category_repo.find_all(session)


def test_find_all_with_invalid_row_raises_internal_error(session, category_repo):
    session.add(CategoryModel(obj_id="12345", name="壊れた"))
    session.flush()
    with pytest.raises(InternalError) as info:
        category_repo.find_all(session)
    assert str(info.value) == "商品カテゴリIdは、36文字でなければなりません。"


def test_exists_for_stored_name(session, product_repo):
    assert product_repo.exists(session, ProductName("水性ボールペン(黒)")) is True


def test_exists_for_unknown_name(session, product_repo):
    assert product_repo.exists(session, ProductName("水性ボールペン")) is False


def test_create_then_rollback(session, product_repo):
    category = Category(CategoryId(STATIONERY_ID), None)
    product = Product(ProductId.generate(), ProductName("水性ボールペン"), ProductPrice(200), category)
    product_repo.create(session, product)
    assert product_repo.exists(session, ProductName("水性ボールペン")) is True
    session.rollback()
    assert product_repo.exists(session, ProductName("水性ボールペン")) is False


def test_create_none_raises_domain_error(session, product_repo):
    with pytest.raises(DomainError):
        product_repo.create(session, None)


def test_find_by_name_like_matches(session, product_repo):
    found = product_repo.find_by_name_like(session, "ボールペン")
    assert [p.name.value for p in found] == ["水性ボールペン(黒)"]
    assert found[0].id == ProductId(BALLPEN_ID)
    assert found[0].category.name == CategoryName("文房具")


def test_find_by_name_like_no_match(session, product_repo):
    with pytest.raises(NotFoundError) as info:
        product_repo.find_by_name_like(session, "川")
    assert str(info.value) == "キーワード:'川'に該当する商品は見つかりませんでした。"


def test_find_by_name_like_without_tables(engine, session, product_repo):
    Base.metadata.drop_all(engine)
    with pytest.raises(InternalError):
        product_repo.find_by_name_like(session, "ペン")