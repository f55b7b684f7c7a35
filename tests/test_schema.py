"""
Tests for creating and dropping the customers table.
"""
import pytest
from unittest.mock import MagicMock

from serialized_lob.data import SqliteAdapter
from serialized_lob.exceptions import StorageError
from serialized_lob.migrations import SchemaMigration
from serialized_lob.migrations.schema import CREATE_SCHEMA_SQL


def table_names(adapter):
    with adapter:
        rows = adapter.execute_query("SELECT name FROM sqlite_master WHERE type = 'table'")
    return [row['name'] for row in rows]


def test_create_and_drop(tmp_path):
    adapter = SqliteAdapter(str(tmp_path / "schema.db"))
    migration = SchemaMigration(adapter)

    migration.create()
    assert "customers" in table_names(adapter)

    migration.drop()
    assert "customers" not in table_names(adapter)


def test_create_is_idempotent(tmp_path):
    migration = SchemaMigration(SqliteAdapter(str(tmp_path / "schema.db")))

    migration.create()
    migration.create()


def test_drop_missing_table(tmp_path):
    SchemaMigration(SqliteAdapter(str(tmp_path / "schema.db"))).drop()


def test_reset_discards_rows(tmp_path):
    adapter = SqliteAdapter(str(tmp_path / "schema.db"))
    migration = SchemaMigration(adapter)
    migration.create()
    with adapter:
        adapter.insert("customers", {'id': 1, 'name': "customer", 'departments': "<departmentList />"})

    migration.reset()

    with adapter:
        assert adapter.execute_query("SELECT * FROM customers") == []


def test_custom_table_name(tmp_path):
    adapter = SqliteAdapter(str(tmp_path / "schema.db"))

    SchemaMigration(adapter, table_name="clients").create()

    assert "clients" in table_names(adapter)


@pytest.mark.parametrize("dialect", sorted(CREATE_SCHEMA_SQL))
def test_create_query_per_dialect(dialect):
    adapter = MagicMock()
    adapter.dialect = dialect

    query = SchemaMigration(adapter).get_create_query()

    assert query.startswith("CREATE TABLE IF NOT EXISTS customers (")
    assert "departments" in query


def test_unknown_dialect():
    adapter = MagicMock()
    adapter.dialect = "oracle"

    with pytest.raises(ValueError):
        SchemaMigration(adapter).get_create_query()


def test_create_in_missing_directory_raises_storage_error(tmp_path):
    migration = SchemaMigration(SqliteAdapter(str(tmp_path / "missing_dir" / "schema.db")))

    with pytest.raises(StorageError) as exc_info:
        migration.create()

    assert exc_info.value.__cause__ is not None


def test_driver_error_while_executing_is_wrapped():
    adapter = MagicMock()
    adapter.driver_error = RuntimeError
    adapter.execute_query.side_effect = RuntimeError("relation is locked")

    with pytest.raises(StorageError):
        SchemaMigration(adapter).drop()
