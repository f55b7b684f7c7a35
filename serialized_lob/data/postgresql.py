import logging
import psycopg2
from typing import Any, Dict, Optional, Callable

from serialized_lob.data.base import DbAdapter

logger = logging.getLogger(__name__)


class PostgreSQLAdapter(DbAdapter):
    """PostgreSQL adapter for interacting with PostgreSQL."""

    dialect = 'postgres'
    driver_error = psycopg2.Error

    def __init__(self, host: str, port: int, user: str, password: str, database: str, connection_resolver: Optional[Callable] = None, connection_closer: Optional[Callable] = None):
        self._host = host
        self._port = port
        self._user = user
        self._password = password
        self._database = database
        self._connection = None
        self._cursor = None

        if connection_resolver is None:
            self._connection_resolver = psycopg2.connect
        else:
            self._connection_resolver = connection_resolver

        self._connection_closer = connection_closer

    def __enter__(self):
        """Context manager entry point for creating DB connection."""
        self._connection = self.connect
        self._cursor = self._connection.cursor()

        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Context manager exit point for closing DB connection."""
        self.close_connection()

    def close_connection(self):
        """Closes the connection and cursor."""

        if self._connection_closer:
            self._connection_closer(self)
        else:
            if self._cursor is not None:
                self._cursor.close()
                self._cursor = None

            if self._connection is not None:
                self._connection.close()
                self._connection = None

    @property
    def connect(self):
        return self._connection_resolver(
            host=self._host,
            port=self._port,
            user=self._user,
            password=self._password,
            database=self._database
        )

    def _call_cursor(self, function_name, *args, **kwargs):
        """Calls a function specified by function_name argument in PostgreSQL Cursor passing forward args and kwargs."""
        if not self._cursor:
            raise psycopg2.InterfaceError("No cursor is available.")
        return getattr(self._cursor, function_name)(*args, **kwargs)

    def execute_query(self, sql, _vars=None):
        """Executes a query against the DB."""
        if _vars is None:
            _vars = {}

        self._call_cursor('execute', sql, _vars)

        # Statements returning rows have a cursor description
        if self._cursor.description is not None:
            column_names = [desc[0] for desc in self._cursor.description]
            return [dict(zip(column_names, row)) for row in self._call_cursor('fetchall')]

        # For other queries (like CREATE, INSERT, DROP) commit and return None
        self._connection.commit()
        return None

    def get_insert_query(self, table, data, id_column='id'):
        query, values = super().get_insert_query(table, data)
        return f"{query} RETURNING {id_column}", values

    def insert(self, table: str, data: Dict[str, Any], id_column: str = 'id'):
        query, values = self.get_insert_query(table, data, id_column)
        try:
            self._call_cursor('execute', query, values)
            row = self._call_cursor('fetchone')
            self._connection.commit()
        except psycopg2.Error as ex:
            self._connection.rollback()
            logger.error("Error in SQL:\n%s", ex)
            raise
        return row[0] if row else None
