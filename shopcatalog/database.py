"""Connecting to the MySQL database through SQLAlchemy."""

from __future__ import annotations

from urllib.parse import parse_qsl

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import Session, sessionmaker

from shopcatalog.config import Config
from shopcatalog.errors import InternalError
from shopcatalog.ports import DatabaseConnector

_MAX_IDLE_CONNECTIONS = 10
_MAX_OPEN_CONNECTIONS = 100
_CONNECTION_LIFETIME_SECONDS = 60 * 60
# Options from the configured option string that the MySQL driver understands;
# the rest are ignored.
_DRIVER_OPTIONS = frozenset({"charset", "connect_timeout", "read_timeout", "write_timeout"})


class MySQLConnector(DatabaseConnector[Engine]):
    """Opens a pooled connection to the configured MySQL database."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def url(self) -> URL:
        """The connection URL built from the configuration."""
        settings = self.config.db
        query = {
            key: value
            for key, value in parse_qsl(settings.option.lstrip("?"))
            if key in _DRIVER_OPTIONS
        }
        return URL.create(
            drivername="mysql+pymysql",
            username=settings.user or None,
            password=settings.password or None,
            host=settings.host or None,
            port=settings.port or None,
            database=settings.dbname or None,
            query=query,
        )

    def connect(self) -> Engine:
        """Create the engine and check that the database answers."""
        try:
            engine = create_engine(
                self.url(),
                pool_size=_MAX_IDLE_CONNECTIONS,
                max_overflow=_MAX_OPEN_CONNECTIONS - _MAX_IDLE_CONNECTIONS,
                pool_recycle=_CONNECTION_LIFETIME_SECONDS,
                echo=True,
            )
        except Exception as exc:
            raise InternalError(f"データベースへの接続に失敗しました: {exc}") from exc
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as exc:
            engine.dispose()
            raise InternalError(f"データベースへの接続に失敗しました: {exc}") from exc
        return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a factory of sessions bound to *engine*."""
    return sessionmaker(bind=engine, expire_on_commit=False)