import pytest

from shopcatalog.categories import Category, CategoryId, CategoryName
from shopcatalog.dto import CategoryDTO, ProductDTO
from shopcatalog.errors import DomainError
from shopcatalog.products import Product, ProductId, ProductName, ProductPrice
from shopcatalog.web_adapters import CategoryDTOAdapter, ProductDTOAdapter

CATEGORY_ID = "b1524011-b6af-417e-8bf2-f449dd58b5c0"
PRODUCT_ID = "ac413f22-0cf1-490a-9635-7e9ca810e544"


@pytest.fixture
def product_adapter():
    return ProductDTOAdapter(CategoryDTOAdapter())


def _category_dto():
    return CategoryDTO(CATEGORY_ID, "文房具")


def test_category_convert():
    category = Category(CategoryId(CATEGORY_ID), CategoryName("文房具"))
    assert CategoryDTOAdapter().convert(category) == CategoryDTO(CATEGORY_ID, "文房具")


def test_category_restore():
    category = CategoryDTOAdapter().restore(_category_dto())
    assert category.id == CategoryId(CATEGORY_ID)
    assert category.name == CategoryName("文房具")


def test_category_restore_invalid_id():
    with pytest.raises(DomainError) as info:
        CategoryDTOAdapter().restore(CategoryDTO("12345", "文房具"))
    assert str(info.value) == "商品カテゴリIdは、36文字でなければなりません。"


def test_category_restore_empty_name():
    with pytest.raises(DomainError) as info:
        CategoryDTOAdapter().restore(CategoryDTO(CATEGORY_ID, ""))
    assert str(info.value) == "商品カテゴリ名は、空文字列であってはなりません。"


def test_product_convert(product_adapter):
    product = Product(
        ProductId(PRODUCT_ID),
        ProductName("ボールペン"),
        ProductPrice(200),
        Category(CategoryId(CATEGORY_ID), CategoryName("文房具")),
    )
    assert product_adapter.convert(product) == ProductDTO(
        PRODUCT_ID, "ボールペン", "200", _category_dto()
    )


def test_product_round_trip(product_adapter):
    dto = ProductDTO(PRODUCT_ID, "消しゴム", "150", _category_dto())
    assert product_adapter.convert(product_adapter.restore(dto)) == dto


def test_product_restore_empty_id_generates_one(product_adapter):
    product = product_adapter.restore(ProductDTO("", "消しゴム", "150", _category_dto()))
    assert len(product.id.value) == 36
    assert ProductId(product.id.value) == product.id
    assert product.name.value == "消しゴム"
    assert product.price.value == 150
    assert product.category.id.value == CATEGORY_ID


def test_product_restore_generates_distinct_ids(product_adapter):
    dto = ProductDTO("", "消しゴム", "150", _category_dto())
    first = product_adapter.restore(dto)
    second = product_adapter.restore(dto)
    assert (first == second) is False
    assert (first.id.value == second.id.value) is False
    assert first.name == second.name


@pytest.mark.parametrize("price", ["abc", "12.5", " 150", ""])
def test_product_restore_non_integer_price(product_adapter, price):
    with pytest.raises(DomainError) as info:
        product_adapter.restore(ProductDTO("", "消しゴム", price, _category_dto()))
    assert str(info.value) == "単価は整数でなければなりません。"


def test_product_restore_price_out_of_range(product_adapter):
    with pytest.raises(DomainError) as info:
        product_adapter.restore(ProductDTO("", "消しゴム", "49", _category_dto()))
    assert str(info.value) == "商品単価は、50以上10000未満でなければなりません。"


def test_product_restore_invalid_id(product_adapter):
    with pytest.raises(DomainError) as info:
        product_adapter.restore(ProductDTO("12345", "消しゴム", "150", _category_dto()))
    assert str(info.value) == "商品Idは、36文字でなければなりません。"


def test_product_restore_invalid_category_first(product_adapter):
    with pytest.raises(DomainError) as info:
        product_adapter.restore(ProductDTO("12345", "", "x", CategoryDTO("", "文房具")))
    assert str(info.value) == "商品カテゴリIdは、空文字列であってはなりません。"


def test_product_restore_missing_category(product_adapter):
    with pytest.raises(TypeError):
        product_adapter.restore(ProductDTO("", "消しゴム", "150", None))