from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Union


class DbAdapter(ABC):
    """Abstract base class for database adapters."""

    # Name of the SQL dialect spoken by the adapter, e.g. 'sqlite'.
    dialect: str = None
    # Base exception class raised by the adapter's driver.
    driver_error: type = Exception
    # Parameter placeholder used by the driver.
    placeholder: str = '%s'

    @abstractmethod
    def __enter__(self) -> 'DbAdapter':
        """Context manager entry point for preparing DB connection."""
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_value, traceback):
        """Context manager exit point for closing DB connection."""
        pass

    @abstractmethod
    def execute_query(self, sql: str, _vars: Union[Dict[str, Any], Tuple] = None) -> Any:
        """Executes a raw SQL query against the DB."""
        pass

    def parse_db_response(self, response: Any) -> List[Dict[str, Any]]:
        """
        Parses the raw response from the database.

        Returns the list of row dicts, or an empty list when there is no result.
        """
        if not response or not isinstance(response, list):
            return []
        return response

    def get_one(self, table: str, conditions: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Fetches a single record from the specified table based on given conditions."""
        query = f"SELECT * FROM {table}"
        values = []
        if conditions:
            condition_strs = []
            for key, value in conditions.items():
                condition_strs.append(f"{key} = {self.placeholder}")
                values.append(value)
            query += f" WHERE {' AND '.join(condition_strs)}"
        query += " LIMIT 1"

        db_response = self.parse_db_response(self.execute_query(query, tuple(values)))
        if not db_response:
            return None
        return db_response[0]

    def get_insert_query(self, table: str, data: Dict[str, Any], id_column: str = 'id') -> Tuple[str, Tuple]:
        """
        Returns the query to insert a data record in the table.

        Columns whose value is None are left out so the store fills in defaults,
        such as a generated identity.
        """
        columns = {key: value for key, value in data.items() if value is not None}
        placeholders = ', '.join([self.placeholder] * len(columns))
        query = f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({placeholders})"
        return query, tuple(columns.values())

    @abstractmethod
    def insert(self, table: str, data: Dict[str, Any], id_column: str = 'id') -> Any:
        """Inserts a record in the specified table and returns its identity."""
        pass
