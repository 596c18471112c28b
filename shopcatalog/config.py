"""Database connection settings read from a YAML file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from shopcatalog.errors import InternalError

_STRING_KEYS = ("user", "password", "host", "dbname", "option")


def _parse_error(detail: object) -> InternalError:
    return InternalError(f"YAMLの解析に失敗しました: {detail}")


def _as_text(key: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise _parse_error(f"db.{key} must be a scalar value")


@dataclass(frozen=True)
class DatabaseSettings:
    """Where and how to reach the database."""

    user: str = ""
    password: str = ""
    host: str = ""
    port: int = 0
    dbname: str = ""
    option: str = ""


@dataclass(frozen=True)
class Config:
    """Application configuration: currently only the database section."""

    db: DatabaseSettings = field(default_factory=DatabaseSettings)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> Config:
        """Build a configuration from a decoded YAML document; unknown keys are ignored."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise _parse_error("the document must be a mapping")
        section = data.get("db")
        if section is None:
            return cls()
        if not isinstance(section, Mapping):
            raise _parse_error("db must be a mapping")

        values: dict[str, Any] = {}
        for key in _STRING_KEYS:
            if section.get(key) is not None:
                values[key] = _as_text(key, section[key])
        port = section.get("port")
        if port is not None:
            if isinstance(port, bool) or not isinstance(port, int):
                raise _parse_error("db.port must be an integer")
            values["port"] = port
        return cls(db=DatabaseSettings(**values))


def load_config(path: str | Path) -> Config:
    """Read the YAML file at *path* and return its configuration."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise InternalError(f"config.yamlの読み込みに失敗しました: {exc}") from exc
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise _parse_error(exc) from exc
    return Config.from_mapping(document)