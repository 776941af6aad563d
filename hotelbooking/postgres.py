"""Database access: a connection pool interface and connecting with retries."""

import abc
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from .config import Config
from .sqlbuilder import StatementBuilder

logger = logging.getLogger(__name__)

DEFAULT_CONN_ATTEMPTS = 10
DEFAULT_CONN_TIMEOUT = 1.0
PERM_DENIED = "42501"


class Pool(abc.ABC):
    """A pool of database connections."""

    @abc.abstractmethod
    def fetch_one(self, sql: str, args: Sequence[Any]) -> tuple | None:
        """Return the first row of the result, or None when there is none."""

    @abc.abstractmethod
    def fetch_all(self, sql: str, args: Sequence[Any]) -> list[tuple]:
        """Return every row of the result."""

    @abc.abstractmethod
    def execute(self, sql: str, args: Sequence[Any]) -> int:
        """Run a statement and return the number of rows affected."""

    @abc.abstractmethod
    def close(self) -> None:
        """Release the pool's connections."""


@dataclass
class Postgres:
    pool: Pool | None
    builder: StatementBuilder = field(default_factory=StatementBuilder)

    def close(self) -> None:
        if self.pool is not None:
            self.pool.close()


def dsn(config: Config) -> str:
    pg = config.postgres
    return (
        f"host={pg.postgresql_host} port={pg.postgresql_port} user={pg.postgresql_user} "
        f"dbname={pg.postgresql_dbname} sslmode=disable password={pg.postgresql_password}"
    )


def connect(
    config: Config,
    connector: Callable[[str], Pool],
    attempts: int = DEFAULT_CONN_ATTEMPTS,
    delay: float = DEFAULT_CONN_TIMEOUT,
) -> Postgres:
    """Open a pool via connector, retrying up to `attempts` times."""
    source = dsn(config)
    last_error: Exception | None = None
    for left in range(attempts, 0, -1):
        try:
            return Postgres(pool=connector(source))
        except Exception as error:
            last_error = error
            logger.info("Postgres is trying to connect, attempts left: %d", left)
            time.sleep(delay)
    raise ConnectionError(f"could not connect to postgres: {last_error}") from last_error