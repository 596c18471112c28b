# shopcatalog

A small HTTP API service that manages products and product categories.
It serves a JSON API for listing categories, searching products by
keyword and registering new products, with the data kept in a MySQL
database reached through SQLAlchemy.

## Installation

```
pip install .
```

The service connects with the SQLAlchemy URL scheme `mysql+pymysql`, so
the PyMySQL driver has to be installed alongside it:

```
pip install pymysql
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Running the service

```
shopcatalog
```

Options:

- `--config PATH`: YAML file with the database settings (default `config.yml`
  in the current directory),
- `--host ADDRESS`: address to listen on (default `0.0.0.0`),
- `--port PORT`: port to listen on (default `8085`).

The command reads the configuration, connects to the database and checks
that it answers, then serves the API with Flask's built-in server until
it is interrupted. If the configuration cannot be read or the database
cannot be reached, the message is printed to standard error and the
command exits with status 1. Executed SQL statements are logged.

## Configuration

Database settings are read from a YAML document with a `db` section:

```yaml
db:
  user: root
  password: password
  host: localhost
  port: 3306
  dbname: exercisedb
  option: "?charset=utf8mb4&parseTime=True&loc=Local"
```

Unknown keys are ignored and missing ones are left empty. `port` must be
an integer. Of the `option` query string, only `charset`,
`connect_timeout`, `read_timeout` and `write_timeout` are passed on to
the driver.

From Python, `shopcatalog.config.load_config(path)` reads such a file
and `Config.from_mapping(data)` builds a `Config` from an already parsed
mapping. Reading or parsing failures raise
`shopcatalog.errors.InternalError`.

## API

| Method | Path                          | Description                                   |
|--------|-------------------------------|-----------------------------------------------|
| GET    | `/category/list`              | List all product categories                   |
| GET    | `/product/keyword/<keyword>`  | Find products whose name contains the keyword |
| POST   | `/product/register`           | Register a new product                        |

Cross-origin requests from any origin are allowed; preflight `OPTIONS`
requests are answered with the allowed methods and headers.

### Category

```json
{"categoryId": "b1524011-b6af-417e-8bf2-f449dd58b5c0", "categoryName": "文房具"}
```

### Product

```json
{
  "productId": "",
  "productName": "消しゴム",
  "productPrice": "150",
  "category": {
    "categoryId": "b1524011-b6af-417e-8bf2-f449dd58b5c0",
    "categoryName": "文房具"
  }
}
```

When registering, an empty `productId` lets the service generate a new
one. The price is sent as a string holding an integer from 50 to 9999.
On success the received product data is sent back unchanged. A product
whose name is already registered is refused.

### Errors

Error responses carry the message as a JSON string:

- `400` for invalid input (domain rule violations) or a product that is
  already registered; a request body that is not a valid product JSON
  object gets `400` with `{"error": "<message>"}`,
- `404` when no product matches a keyword,
- `500` for database or other internal failures.

## Domain rules

- Category and product identifiers are 36-character UUID strings.
- Category names are 1 to 20 characters long.
- Product names are 1 to 30 characters long.
- Product prices are integers from 50 to 9999.

## Using the library

The domain model lives in `shopcatalog.categories` and
`shopcatalog.products`; validation failures raise
`shopcatalog.errors.DomainError`.

```python
from shopcatalog.categories import Category, CategoryId, CategoryName
from shopcatalog.products import Product, ProductId, ProductName, ProductPrice

category = Category(CategoryId.generate(), CategoryName("文房具"))
product = Product(ProductId.generate(), ProductName("ボールペン"), ProductPrice(100), category)
print(product)
```

Other modules:

- `shopcatalog.dbmodels`: SQLAlchemy mappings of the `category` and
  `product` tables,
- `shopcatalog.repositories`: adapters and repositories over those tables,
- `shopcatalog.database`: `MySQLConnector` and `create_session_factory`,
- `shopcatalog.usecases`: `CategoryList`, `ProductKeyword` and
  `ProductRegister`,
- `shopcatalog.dto` and `shopcatalog.web_adapters`: the JSON transfer
  objects and their conversion,
- `shopcatalog.handlers`: request handlers returning `(status, body)` pairs,
- `shopcatalog.app`: `build_handlers(session_factory)` and
  `create_app(handlers)`, which return the Flask (WSGI) application.

Any SQLAlchemy session factory can be passed to `build_handlers`, for
example one made with `create_session_factory(engine)`.

## What it does not do

- It does not create the database tables or load any data; the `category`
  and `product` tables must already exist.
- It serves no API documentation or Swagger UI endpoint.
- There are no endpoints for changing or deleting products or categories.