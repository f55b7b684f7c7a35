"""
Tests for PooledConnectionPlugin.
"""
import pytest
from unittest.mock import MagicMock, Mock, patch

import psycopg2
import pymysql

from serialized_lob.data.postgresql import PostgreSQLAdapter
from serialized_lob.plugins.pooled_connection import PooledConnectionPlugin


def test_invalid_database_type():
    with pytest.raises(ValueError):
        PooledConnectionPlugin(database_type="oracle")


@patch('serialized_lob.plugins.pooled_connection.PooledDB')
def test_postgres_pool_configuration(mock_pooled_db):
    PooledConnectionPlugin("postgres", max_connections=5, host="db", port=5432, user="lob",
                           password="pw", database="customers")

    mock_pooled_db.assert_called_once_with(
        creator=psycopg2, maxconnections=5, host="db", port=5432, user="lob",
        password="pw", database="customers")


@patch('serialized_lob.plugins.pooled_connection.PooledDB')
def test_mysql_pool_uses_dict_cursor(mock_pooled_db):
    PooledConnectionPlugin("mysql", host="db")

    kwargs = mock_pooled_db.call_args.kwargs
    assert kwargs['creator'] is pymysql
    assert kwargs['cursorclass'] is pymysql.cursors.DictCursor


@patch('serialized_lob.plugins.pooled_connection.PooledDB')
def test_adapter_borrows_and_returns_pooled_connection(mock_pooled_db):
    pooled_connection = MagicMock()
    cursor = Mock()
    pooled_connection.cursor.return_value = cursor
    mock_pooled_db.return_value.connection.return_value = pooled_connection
    plugin = PooledConnectionPlugin("postgres", host="db")

    adapter = PostgreSQLAdapter("ignored", 0, "ignored", "ignored", "ignored",
                                connection_resolver=plugin.connection_resolver,
                                connection_closer=plugin.connection_closer)
    with adapter:
        assert adapter._connection is pooled_connection

    mock_pooled_db.return_value.connection.assert_called_once_with()
    cursor.close.assert_called_once()
    pooled_connection.close.assert_called_once()
    assert adapter._connection is None
    assert adapter._cursor is None
