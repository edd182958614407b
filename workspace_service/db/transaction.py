# File: /workspace_service/db/transaction.py | Version: 1.2 | Title: Transaction envelope (explicit commit, rollback on every other exit)
from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Generator, List, Mapping, Optional

from sqlalchemy import bindparam, text
from sqlalchemy.engine import Connection, Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.types import TypeEngine

from workspace_service.core.errors import InfraError
from workspace_service.db.sql_builder import Statement

log = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")


def _to_clause(statement: Statement, columns: Optional[Mapping[str, TypeEngine]] = None):
    # $n -> :pn; identifiers are validated by the builder, so "$" never appears elsewhere
    sql = _PLACEHOLDER.sub(r":p\1", statement.sql)
    clause = text(sql)
    if statement.args:
        clause = clause.bindparams(
            *(bindparam(f"p{i}", value) for i, value in enumerate(statement.args, start=1))
        )
    if columns:
        clause = clause.columns(**dict(columns))
    return clause


class Transaction:
    """
    One unit of work on one pooled connection.

    Nothing executed here is visible to other connections until ``commit()``
    succeeds. Hand the same instance to helpers that must share the unit of
    work; they must never commit it themselves.
    """

    def __init__(self, connection: Connection, purpose: str):
        self._connection = connection
        self._purpose = purpose
        self._trans = connection.begin()
        self.committed = False

    def _fail(self, message: str) -> InfraError:
        # Called from an except block, so the driver error is attached to the record
        log.exception(message, extra={"error_kind": InfraError.kind})
        return InfraError(message, operation=self._purpose)

    def execute(self, statement: Statement) -> int:
        log.debug("%s: %s", self._purpose, statement.sql)
        try:
            result = self._connection.execute(_to_clause(statement))
        except SQLAlchemyError as exc:
            raise self._fail(f"Failed to execute SQL statement to {self._purpose}") from exc
        return result.rowcount

    def fetch_all(
        self,
        statement: Statement,
        columns: Optional[Mapping[str, TypeEngine]] = None,
    ) -> List[RowMapping]:
        log.debug("%s: %s", self._purpose, statement.sql)
        try:
            result = self._connection.execute(_to_clause(statement, columns))
            return list(result.mappings().all())
        except SQLAlchemyError as exc:
            raise self._fail(f"Failed to execute SQL statement to {self._purpose}") from exc

    def commit(self) -> None:
        try:
            self._trans.commit()
        except SQLAlchemyError as exc:
            raise self._fail(f"Failed to commit SQL transaction to {self._purpose}") from exc
        self.committed = True

    def rollback(self) -> None:
        if self._trans.is_active:
            self._trans.rollback()


@contextmanager
def begin_transaction(engine: Engine, purpose: str) -> Generator[Transaction, None, None]:
    """
    Acquire a pooled connection and open a transaction on it.

    Usage:
        with begin_transaction(engine, "delete view") as tx:
            tx.execute(statement)
            tx.commit()

    Leaving the block without ``commit()`` (early return, exception) rolls
    the transaction back. The connection always goes back to the pool.
    """
    try:
        connection = engine.connect()
    except SQLAlchemyError as exc:
        log.exception(
            "Failed to acquire a database connection to %s",
            purpose,
            extra={"error_kind": InfraError.kind},
        )
        raise InfraError(
            f"Failed to acquire a database connection to {purpose}", operation=purpose
        ) from exc

    try:
        try:
            tx = Transaction(connection, purpose)
        except SQLAlchemyError as exc:
            log.exception(
                "Failed to begin SQL transaction to %s",
                purpose,
                extra={"error_kind": InfraError.kind},
            )
            raise InfraError(f"Failed to begin SQL transaction to {purpose}", operation=purpose) from exc
        try:
            yield tx
        finally:
            if not tx.committed:
                log.debug("Rolling back transaction to %s", purpose)
                tx.rollback()
    finally:
        connection.close()
