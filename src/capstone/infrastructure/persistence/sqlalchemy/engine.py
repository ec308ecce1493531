"""Async engine construction."""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def create_database_engine(url: str, **kwargs: Any) -> AsyncEngine:
    """
    Create the async engine for ``url``.

    For SQLite the driver's implicit transaction handling is disabled and
    BEGIN is emitted explicitly, otherwise SAVEPOINTs do not nest inside the
    surrounding transaction.
    """
    engine = create_async_engine(url, **kwargs)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _disable_pysqlite_transactions(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(engine.sync_engine, "begin")
        def _emit_begin(conn):
            conn.exec_driver_sql("BEGIN")

    return engine
