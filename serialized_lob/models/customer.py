"""
Customer model
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from serialized_lob.exceptions import NotFoundError
from serialized_lob.markup import codec
from serialized_lob.markup.element import Element
from .department import Department

logger = logging.getLogger(__name__)

# Identity value meaning "not assigned yet"; the store generates one on insert.
NO_ID = 0


@dataclass
class Customer:
    """
    A customer owning a forest of departments.

    The whole forest is stored as markup text in a single column of the
    customer's row. Concurrent writers to the same row are not coordinated;
    there is no locking or versioning.
    """

    name: str
    id: int = NO_ID
    departments: List[Department] = field(default_factory=list)

    def departments_to_element(self) -> Element:
        return codec.tree_to_element(self.departments)

    def read_departments(self, element: Element):
        """
        Replaces `departments` with the forest held by `element`.

        Existing departments are discarded, not merged. If the element cannot be
        converted the current departments are kept.
        """
        self.departments = codec.element_to_tree(element)

    def as_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'departments': codec.element_to_string(self.departments_to_element())
        }

    def get_for_db(self) -> Dict[str, Any]:
        """Returns the row for this customer; a missing identity is left to the store."""
        data = self.as_dict()
        if data['id'] == NO_ID:
            data['id'] = None
        return data

    def insert(self, storage) -> int:
        """
        Writes this customer as a new row and returns the identity used.

        :param storage: a `CustomerRepository`.
        :raises StorageError: if the backend fails or yields no identity.
        """
        data = self.get_for_db()
        self.id = storage.insert_customer_row(data['id'], data['name'], data['departments'])
        logger.debug("Inserted customer %r with id %s", self.name, self.id)
        return self.id

    @classmethod
    def load(cls, customer_id: int, storage) -> 'Customer':
        """
        Reads the row for `customer_id` into a new customer.

        :param storage: a `CustomerRepository`.
        :raises NotFoundError: if no row has this identity.
        :raises MalformedMarkupError: if the stored departments cannot be parsed.
        """
        row: Optional[Dict[str, Any]] = storage.select_customer_row(customer_id)
        if row is None:
            raise NotFoundError(customer_id)

        customer = cls(name=row['name'], id=customer_id)
        # A NULL column is read as an empty forest.
        if row['departments'] is not None:
            customer.read_departments(codec.string_to_element(row['departments']))
        return customer
