"""The catalog web application: wiring of the layers, routing and the command entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from flask import Flask, Response, request

from shopcatalog.config import load_config
from shopcatalog.database import MySQLConnector, create_session_factory
from shopcatalog.errors import InternalError
from shopcatalog.handlers import (
    CategoryListHandler,
    Handlers,
    ProductKeywordHandler,
    ProductRegisterHandler,
)
from shopcatalog.repositories import (
    SqlCategoryAdapter,
    SqlCategoryRepository,
    SqlProductAdapter,
    SqlProductRepository,
)
from shopcatalog.usecases import CategoryList, ProductKeyword, ProductRegister, SessionFactory
from shopcatalog.web_adapters import CategoryDTOAdapter, ProductDTOAdapter

_log = logging.getLogger(__name__)

_DEFAULT_PORT = 8085
_ALLOW_METHODS = "GET,POST,PUT,PATCH,DELETE,OPTIONS"
_ALLOW_HEADERS = "Origin,Content-Type,Accept,Authorization"
_EXPOSE_HEADERS = "Content-Length"
_MAX_AGE_SECONDS = 12 * 60 * 60


def build_handlers(session_factory: SessionFactory) -> Handlers:
    """Assemble repositories, use cases and request handlers on top of *session_factory*."""
    category_model_adapter = SqlCategoryAdapter()
    category_repository = SqlCategoryRepository(category_model_adapter)
    product_repository = SqlProductRepository(SqlProductAdapter(category_model_adapter))
    _log.info("インフラストラクチャ層の構築が完了しました。")

    category_list = CategoryList(session_factory, category_repository)
    product_keyword = ProductKeyword(session_factory, product_repository)
    product_register = ProductRegister(session_factory, product_repository)
    _log.info("アプリケーション層の構築が完了しました。")

    category_dto_adapter = CategoryDTOAdapter()
    product_dto_adapter = ProductDTOAdapter(category_dto_adapter)
    handlers = Handlers(
        category_list=CategoryListHandler(category_list, category_dto_adapter),
        product_register=ProductRegisterHandler(product_register, product_dto_adapter),
        product_keyword=ProductKeywordHandler(product_keyword, product_dto_adapter),
    )
    _log.info("プレゼンテーション層の構築が完了しました。")
    return handlers


def _json_response(status: int, body: Any) -> Response:
    text = json.dumps(body, ensure_ascii=False, separators=(",", ":"))
    return Response(text, status=status, content_type="application/json; charset=utf-8")


def _is_cross_origin() -> bool:
    origin = request.headers.get("Origin")
    if not origin:
        return False
    host = request.host
    return origin not in (f"http://{host}", f"https://{host}")


def create_app(handlers: Handlers) -> Flask:
    """Create the Flask application serving the catalog endpoints, open to every origin."""
    app = Flask(__name__)

    @app.before_request
    def _answer_preflight() -> Response | None:
        if request.method != "OPTIONS" or not _is_cross_origin():
            return None
        response = Response(status=204)
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = _ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = _ALLOW_HEADERS
        response.headers["Access-Control-Max-Age"] = str(_MAX_AGE_SECONDS)
        return response

    @app.after_request
    def _add_cors_headers(response: Response) -> Response:
        if request.method != "OPTIONS" and _is_cross_origin():
            response.headers["Access-Control-Allow-Origin"] = "*"
            response.headers["Access-Control-Allow-Credentials"] = "true"
            response.headers["Access-Control-Expose-Headers"] = _EXPOSE_HEADERS
        return response

    @app.get("/category/list")
    def list_categories() -> Response:
        return _json_response(*handlers.category_list.handle())

    @app.get("/product/keyword/<keyword>")
    def search_products(keyword: str) -> Response:
        return _json_response(*handlers.product_keyword.handle(keyword))

    @app.post("/product/register")
    def register_product() -> Response:
        return _json_response(*handlers.product_register.handle(request.get_data()))

    return app


def main(argv: list[str] | None = None) -> int:
    """Connect to the configured database and serve the API until interrupted."""
    parser = argparse.ArgumentParser(
        prog="shopcatalog", description="Serve the product and category catalog API."
    )
    parser.add_argument("--config", default="config.yml", help="YAML file with the db settings")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=_DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        engine = MySQLConnector(load_config(args.config)).connect()
    except InternalError as exc:
        print(exc, file=sys.stderr)
        return 1

    app = create_app(build_handlers(create_session_factory(engine)))
    print(f"演習APIの開始 Port:{args.port} !!!")
    try:
        app.run(host=args.host, port=args.port)
    finally:
        print("演習API停止 !!!")
        engine.dispose()
    return 0