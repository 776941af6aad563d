"""Assembly and entry point of the loyalty service."""

import argparse
import logging
import sqlite3
import threading
from pathlib import Path
from typing import Any, Sequence

from flask import Flask

from ..config import load_config, parse_config
from ..postgres import Pool, Postgres, connect
from ..server import register_health, serve
from .handlers import create_blueprint
from .repo import LoyaltyRepo
from .usecase import LoyaltyUseCase

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "config/config"


def create_app(db: Postgres) -> Flask:
    app = Flask(__name__)
    register_health(app)
    app.register_blueprint(create_blueprint(LoyaltyUseCase(LoyaltyRepo(db))))
    return app


class _SqlitePool(Pool):
    """Pool backed by an SQLite database file."""

    def __init__(self, path: str) -> None:
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._lock = threading.Lock()

    def _run(self, sql: str, args: Sequence[Any]) -> tuple[list[tuple], int]:
        params = {str(index): value for index, value in enumerate(args, 1)}
        with self._lock, self._conn:
            cursor = self._conn.execute(sql, params)
            rows = cursor.fetchall()
            return rows, cursor.rowcount

    def fetch_one(self, sql: str, args: Sequence[Any]) -> tuple | None:
        rows, _ = self._run(sql, args)
        return tuple(rows[0]) if rows else None

    def fetch_all(self, sql: str, args: Sequence[Any]) -> list[tuple]:
        rows, _ = self._run(sql, args)
        return [tuple(row) for row in rows]

    def execute(self, sql: str, args: Sequence[Any]) -> int:
        _, count = self._run(sql, args)
        return count

    def close(self) -> None:
        self._conn.close()


def _open_pool(source: str) -> Pool:
    settings = dict(part.partition("=")[::2] for part in source.split())
    return _SqlitePool(settings.get("dbname") or ":memory:")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="loyalty-service", description="Loyalty service API server.")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="config file path without extension")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Starting api server")

    path = Path(args.config)
    try:
        raw = load_config(path.name, path.parent)
    except Exception as error:
        logger.error("LoadConfig: %s", error)
        return 1
    try:
        config = parse_config(raw)
    except ValueError as error:
        logger.error("ParseConfig: %s", error)
        return 1
    try:
        db = connect(config, _open_pool)
    except ConnectionError as error:
        logger.error("Postgresql init: %s", error)
        return 1
    logger.info("Connected to database")

    try:
        serve(create_app(db), config.server)
    finally:
        db.close()
    return 0