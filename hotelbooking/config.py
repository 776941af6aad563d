"""Service configuration loaded from a YAML, JSON or TOML file."""

import json
import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_EXTENSIONS = (".yml", ".yaml", ".json", ".toml")


class ConfigNotFoundError(FileNotFoundError):
    def __init__(self) -> None:
        super().__init__("config file not found")


@dataclass
class ServerConfig:
    app_version: str = ""
    port: str = ""
    jwt_secret_key: str = ""
    ctx_user_key: str = ""
    read_timeout: float = 0.0
    write_timeout: float = 0.0


@dataclass
class PostgresConfig:
    postgresql_host: str = ""
    postgresql_port: str = ""
    postgresql_user: str = ""
    postgresql_password: str = ""
    postgresql_dbname: str = ""


@dataclass
class CircuitBreakerConfig:
    max_requests: int = 0


@dataclass
class Config:
    server: ServerConfig = field(default_factory=ServerConfig)
    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    circuit_breaker: CircuitBreakerConfig = field(default_factory=CircuitBreakerConfig)


def load_config(filename: str, search_path: str | Path = ".") -> dict[str, Any]:
    """Find `filename` with a known extension under search_path and read it."""
    base = Path(search_path) / filename
    for ext in _EXTENSIONS:
        path = base.with_name(base.name + ext)
        if path.is_file():
            text = path.read_text(encoding="utf-8")
            if ext == ".json":
                data = json.loads(text)
            elif ext == ".toml":
                data = tomllib.loads(text)
            else:
                data = yaml.safe_load(text)
            return data or {}
    raise ConfigNotFoundError()


def _key(name: str) -> str:
    return name.replace("_", "").lower()


def _convert(value: Any, kind: type) -> Any:
    if kind is str:
        if isinstance(value, (dict, list)):
            raise ValueError(f"expected a scalar, got {value!r}")
        return str(value)
    if isinstance(value, bool) or isinstance(value, (dict, list)):
        raise ValueError(f"expected a number, got {value!r}")
    if kind is int:
        return int(value)
    return float(value)


def _build(cls: type, data: Any) -> Any:
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping for {cls.__name__}")
    lowered = {_key(str(k)): v for k, v in data.items()}
    kwargs = {}
    for f in fields(cls):
        k = _key(f.name)
        if k not in lowered:
            continue
        kind = f.type if isinstance(f.type, type) else None
        if kind in (str, int, float):
            kwargs[f.name] = _convert(lowered[k], kind)
        else:
            kwargs[f.name] = _build(f.default_factory().__class__, lowered[k])
    return cls(**kwargs)


def parse_config(data: dict[str, Any]) -> Config:
    """Decode raw configuration data into a Config; keys match case-insensitively."""
    try:
        return _build(Config, data)
    except (TypeError, ValueError) as error:
        logger.error("unable to decode into struct, %s", error)
        raise ValueError(f"unable to decode config: {error}") from error