"""
Creation and removal of the customers table.
"""
import logging

from serialized_lob.exceptions import StorageError

logger = logging.getLogger(__name__)

CREATE_SCHEMA_SQL = {
    'sqlite': (
        "CREATE TABLE IF NOT EXISTS {table} ("
        "id INTEGER PRIMARY KEY, "
        "name TEXT NOT NULL, "
        "departments TEXT)"
    ),
    'postgres': (
        "CREATE TABLE IF NOT EXISTS {table} ("
        "id SERIAL PRIMARY KEY, "
        "name VARCHAR(255) NOT NULL, "
        "departments TEXT)"
    ),
    'mysql': (
        "CREATE TABLE IF NOT EXISTS {table} ("
        "id INT AUTO_INCREMENT PRIMARY KEY, "
        "name VARCHAR(255) NOT NULL, "
        "departments LONGTEXT)"
    ),
}

DELETE_SCHEMA_SQL = "DROP TABLE IF EXISTS {table}"


class SchemaMigration:
    def __init__(self, db_adapter, table_name: str = 'customers'):
        self.db_adapter = db_adapter
        self.table_name = table_name

    def execute(self, query, args=None):
        try:
            with self.db_adapter:
                db_response = self.db_adapter.execute_query(query, args)
                return self.db_adapter.parse_db_response(db_response)
        except self.db_adapter.driver_error as ex:
            logger.error("Schema statement on table %s failed: %s", self.table_name, ex)
            raise StorageError(str(ex)) from ex

    def get_create_query(self) -> str:
        dialect = self.db_adapter.dialect
        if dialect not in CREATE_SCHEMA_SQL:
            raise ValueError(f"No schema defined for dialect {dialect!r}")
        return CREATE_SCHEMA_SQL[dialect].format(table=self.table_name)

    def create(self):
        logger.info("Creating table %s", self.table_name)
        self.execute(self.get_create_query())

    def drop(self):
        logger.info("Dropping table %s", self.table_name)
        self.execute(DELETE_SCHEMA_SQL.format(table=self.table_name))

    def reset(self):
        self.drop()
        self.create()
