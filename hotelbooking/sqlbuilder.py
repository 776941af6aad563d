"""A small SQL statement builder with PostgreSQL $n placeholders."""

from dataclasses import dataclass, replace
from typing import Any, Mapping


class _Args:
    def __init__(self) -> None:
        self.values: list[Any] = []

    def add(self, value: Any) -> str:
        self.values.append(value)
        return f"${len(self.values)}"


def _where_sql(conditions: tuple[Mapping[str, Any], ...], args: _Args) -> str:
    parts = []
    for cond in conditions:
        for column in sorted(cond):
            value = cond[column]
            if value is None:
                parts.append(f"{column} IS NULL")
            elif isinstance(value, (list, tuple)):
                if not value:
                    parts.append("(1=0)")
                else:
                    marks = ",".join(args.add(v) for v in value)
                    parts.append(f"{column} IN ({marks})")
            else:
                parts.append(f"{column} = {args.add(value)}")
    return " WHERE " + " AND ".join(parts) if parts else ""


@dataclass(frozen=True)
class SelectQuery:
    columns: str
    table: str = ""
    conditions: tuple = ()
    limit_count: int | None = None
    offset_count: int | None = None

    def from_(self, table: str) -> "SelectQuery":
        return replace(self, table=table)

    def where(self, conditions: Mapping[str, Any]) -> "SelectQuery":
        return replace(self, conditions=self.conditions + (dict(conditions),))

    def limit(self, count: int) -> "SelectQuery":
        return replace(self, limit_count=count)

    def offset(self, count: int) -> "SelectQuery":
        return replace(self, offset_count=count)

    def to_sql(self) -> tuple[str, list[Any]]:
        if not self.columns:
            raise ValueError("select statements must have at least one result column")
        args = _Args()
        sql = f"SELECT {self.columns}"
        if self.table:
            sql += f" FROM {self.table}"
        sql += _where_sql(self.conditions, args)
        if self.limit_count is not None:
            sql += f" LIMIT {self.limit_count}"
        if self.offset_count is not None:
            sql += f" OFFSET {self.offset_count}"
        return sql, args.values


@dataclass(frozen=True)
class InsertQuery:
    table: str
    column_list: str = ""
    rows: tuple = ()
    suffix_text: str = ""

    def columns(self, columns: str) -> "InsertQuery":
        return replace(self, column_list=columns)

    def values(self, *args: Any) -> "InsertQuery":
        return replace(self, rows=self.rows + (tuple(args),))

    def suffix(self, text: str) -> "InsertQuery":
        return replace(self, suffix_text=text)

    def to_sql(self) -> tuple[str, list[Any]]:
        if not self.table:
            raise ValueError("insert statements must specify a table")
        if not self.rows:
            raise ValueError("insert statements must have at least one set of values")
        args = _Args()
        sql = f"INSERT INTO {self.table}"
        if self.column_list:
            sql += f" ({self.column_list})"
        groups = ["(" + ",".join(args.add(v) for v in row) + ")" for row in self.rows]
        sql += " VALUES " + ",".join(groups)
        if self.suffix_text:
            sql += f" {self.suffix_text}"
        return sql, args.values


@dataclass(frozen=True)
class UpdateQuery:
    table: str
    assignments: tuple = ()
    conditions: tuple = ()
    suffix_text: str = ""

    def set(self, column: str, value: Any) -> "UpdateQuery":
        return replace(self, assignments=self.assignments + ((column, value),))

    def where(self, conditions: Mapping[str, Any]) -> "UpdateQuery":
        return replace(self, conditions=self.conditions + (dict(conditions),))

    def suffix(self, text: str) -> "UpdateQuery":
        return replace(self, suffix_text=text)

    def to_sql(self) -> tuple[str, list[Any]]:
        if not self.table:
            raise ValueError("update statements must specify a table")
        if not self.assignments:
            raise ValueError("update statements must have at least one Set clause")
        args = _Args()
        sets = ", ".join(f"{col} = {args.add(val)}" for col, val in self.assignments)
        sql = f"UPDATE {self.table} SET {sets}" + _where_sql(self.conditions, args)
        if self.suffix_text:
            sql += f" {self.suffix_text}"
        return sql, args.values


@dataclass(frozen=True)
class DeleteQuery:
    table: str
    conditions: tuple = ()

    def where(self, conditions: Mapping[str, Any]) -> "DeleteQuery":
        return replace(self, conditions=self.conditions + (dict(conditions),))

    def to_sql(self) -> tuple[str, list[Any]]:
        if not self.table:
            raise ValueError("delete statements must specify a From table")
        args = _Args()
        return f"DELETE FROM {self.table}" + _where_sql(self.conditions, args), args.values


class StatementBuilder:
    """Entry point for building statements."""

    def select(self, columns: str) -> SelectQuery:
        return SelectQuery(columns=columns)

    def insert(self, table: str) -> InsertQuery:
        return InsertQuery(table=table)

    def update(self, table: str) -> UpdateQuery:
        return UpdateQuery(table=table)

    def delete(self, table: str) -> DeleteQuery:
        return DeleteQuery(table=table)