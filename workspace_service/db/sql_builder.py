# File: /workspace_service/db/sql_builder.py | Version: 1.2 | Title: Parameterized SQL statement builder (insert/select/update/delete)
"""
Build single-table SQL statements with positional ``$n`` placeholders.

Usage:
    sql, args = (
        SqlBuilder.update("view_table")
        .add_some_arg("name", name)          # skipped when name is None
        .add_arg("modified_time", now)
        .add_arg_if(has_is_trash, "is_trash", is_trash)
        .and_where_eq("id", view_id)
        .build()
    )

Contributions are kept in add order together with an ``included`` flag and
only filtered when rendering, so placeholder numbers stay contiguous no matter
which optional values were absent. Values only ever travel in ``args``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, NamedTuple

from workspace_service.core.errors import BuildError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class Statement(NamedTuple):
    sql: str
    args: List[Any]


class StatementKind(str, Enum):
    CREATE = "create"
    SELECT = "select"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class _Contribution:
    column: str
    value: Any
    included: bool


def _check_identifier(name: str) -> str:
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise BuildError(f"Invalid SQL identifier: {name!r}")
    return name


class SqlBuilder:
    def __init__(self, kind: StatementKind, table: str):
        self.kind = kind
        self.table = _check_identifier(table)
        self._fields: List[str] = []
        self._args: List[_Contribution] = []
        self._conditions: List[_Contribution] = []

    # ----- constructors -----

    @classmethod
    def create(cls, table: str) -> "SqlBuilder":
        return cls(StatementKind.CREATE, table)

    @classmethod
    def select(cls, table: str) -> "SqlBuilder":
        return cls(StatementKind.SELECT, table)

    @classmethod
    def update(cls, table: str) -> "SqlBuilder":
        return cls(StatementKind.UPDATE, table)

    @classmethod
    def delete(cls, table: str) -> "SqlBuilder":
        return cls(StatementKind.DELETE, table)

    # ----- contributions -----

    def _require(self, operation: str, *kinds: StatementKind) -> None:
        if self.kind not in kinds:
            raise BuildError(f"{operation}() is not supported for {self.kind.value} statements")

    def add_arg(self, column: str, value: Any) -> "SqlBuilder":
        return self.add_arg_if(True, column, value)

    def add_some_arg(self, column: str, value: Any) -> "SqlBuilder":
        """Add ``column = value`` only when ``value`` is not None."""
        return self.add_arg_if(value is not None, column, value)

    def add_arg_if(self, condition: bool, column: str, value: Any) -> "SqlBuilder":
        """Add ``column = value`` only when the caller's ``condition`` holds."""
        self._require("add_arg", StatementKind.CREATE, StatementKind.UPDATE)
        self._args.append(_Contribution(_check_identifier(column), value, bool(condition)))
        return self

    def add_field(self, column: str) -> "SqlBuilder":
        self._require("add_field", StatementKind.SELECT)
        if column != "*":
            _check_identifier(column)
        self._fields.append(column)
        return self

    def and_where_eq(self, column: str, value: Any) -> "SqlBuilder":
        self._require(
            "and_where_eq", StatementKind.SELECT, StatementKind.UPDATE, StatementKind.DELETE
        )
        self._conditions.append(_Contribution(_check_identifier(column), value, True))
        return self

    # ----- rendering -----

    def build(self) -> Statement:
        args: List[Any] = []

        def placeholder(value: Any) -> str:
            args.append(value)
            return f"${len(args)}"

        included = [c for c in self._args if c.included]

        if self.kind is StatementKind.CREATE:
            if not included:
                raise BuildError(f"INSERT into {self.table} has no columns")
            columns = ", ".join(c.column for c in included)
            values = ", ".join(placeholder(c.value) for c in included)
            sql = f"INSERT INTO {self.table} ({columns}) VALUES ({values})"
        elif self.kind is StatementKind.SELECT:
            fields = ", ".join(self._fields) if self._fields else "*"
            sql = f"SELECT {fields} FROM {self.table}"
        elif self.kind is StatementKind.UPDATE:
            if not included:
                raise BuildError(f"UPDATE of {self.table} has an empty SET clause")
            assignments = ", ".join(f"{c.column} = {placeholder(c.value)}" for c in included)
            sql = f"UPDATE {self.table} SET {assignments}"
        else:
            sql = f"DELETE FROM {self.table}"

        if self._conditions:
            where = " AND ".join(
                f"{c.column} = {placeholder(c.value)}" for c in self._conditions
            )
            sql = f"{sql} WHERE {where}"

        return Statement(sql, args)
