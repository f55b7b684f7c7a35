"""
Exceptions raised by serialized_lob
"""


class SerializedLobError(Exception):
    """Base class for every error raised by this library."""


class MalformedMarkupError(SerializedLobError):
    """
    Raised when markup text cannot be parsed, or when a parsed element does not
    have the shape of a department list.
    """


class StorageError(SerializedLobError):
    """Raised when the storage backend rejects or fails an operation."""


class NotFoundError(SerializedLobError):
    """
    Raised when a record is requested by an identity that has no row.

    Attributes:
        customer_id: The identity that was looked up.
    """

    def __init__(self, customer_id):
        self.customer_id = customer_id
        super().__init__(f"No customer found with id {customer_id}")
