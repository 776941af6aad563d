import json

import pytest

from hotelbooking.config import (
    CircuitBreakerConfig,
    Config,
    ConfigNotFoundError,
    load_config,
    parse_config,
)

YAML = """
server:
  AppVersion: "1.0"
  Port: ":8050"
  ReadTimeout: 5
postgres:
  PostgresqlHost: db
  PostgresqlPort: 5432
circuitBreaker:
  maxRequests: 3
"""


def test_load_yaml_and_parse(tmp_path):
    (tmp_path / "config.yml").write_text(YAML)
    cfg = parse_config(load_config("config", tmp_path))
    assert cfg.server.port == ":8050"
    assert cfg.server.read_timeout == 5
    assert cfg.postgres.postgresql_host == "db"
    assert cfg.postgres.postgresql_port == "5432"
    assert cfg.circuit_breaker == CircuitBreakerConfig(max_requests=3)


def test_load_json(tmp_path):
    (tmp_path / "config.json").write_text(json.dumps({"server": {"port": ":1"}}))
    assert load_config("config", tmp_path) == {"server": {"port": ":1"}}


def test_missing_file(tmp_path):
    with pytest.raises(ConfigNotFoundError):
        load_config("config", tmp_path)


def test_empty_data_gives_defaults():
    assert parse_config({}) == Config()


def test_bad_type_raises():
    with pytest.raises(ValueError):
        parse_config({"circuitbreaker": {"maxrequests": "many"}})