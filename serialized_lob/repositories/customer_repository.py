"""
Customer repository: the only component talking to the relational backend
"""
import logging
from typing import Any, Dict, Optional

from serialized_lob.data.base import DbAdapter
from serialized_lob.exceptions import StorageError

logger = logging.getLogger(__name__)


class CustomerRepository:
    """
    Reads and writes customer rows `(id, name, departments)`.

    Every call opens its own connection through the adapter's context manager
    and releases it before returning or raising; no state is kept between calls.
    """

    def __init__(self, adapter: DbAdapter, table_name: str = 'customers'):
        self.adapter = adapter
        self.table_name = table_name

    def _execute_within_context(self, func, *args, **kwargs):
        """Executes an adapter method within the context manager, mapping driver errors to StorageError."""
        try:
            with self.adapter:
                return func(*args, **kwargs)
        except self.adapter.driver_error as ex:
            logger.error("Storage operation on table %s failed: %s", self.table_name, ex)
            raise StorageError(str(ex)) from ex

    def insert_customer_row(self, customer_id: Optional[int], name: str, markup_text: str) -> int:
        """
        Inserts a customer row and returns its identity.

        :param customer_id: identity to use, or None to let the store generate one.
        :raises StorageError: if the insert fails or the store yields no identity.
        """
        data = {'id': customer_id or None, 'name': name, 'departments': markup_text}
        effective_id = self._execute_within_context(self.adapter.insert, self.table_name, data)
        if not effective_id:
            raise StorageError(f"Insert into {self.table_name} did not yield an identity")
        logger.debug("Inserted row %s into %s", effective_id, self.table_name)
        return effective_id

    def select_customer_row(self, customer_id: int) -> Optional[Dict[str, Any]]:
        """
        Returns `{'name': ..., 'departments': ...}` for the row with `customer_id`,
        or None when there is no such row.
        """
        row = self._execute_within_context(self.adapter.get_one, self.table_name, {'id': customer_id})
        if not row:
            logger.debug("No row %s in %s", customer_id, self.table_name)
            return None

        departments = row.get('departments')
        if isinstance(departments, memoryview):
            departments = departments.tobytes()
        if isinstance(departments, bytes):
            departments = departments.decode('utf-8')
        return {'name': row.get('name'), 'departments': departments}
