"""
serialized_lob: persist a customer's department tree as one markup LOB column
"""

from .exceptions import SerializedLobError, MalformedMarkupError, StorageError, NotFoundError
from .models import Customer, Department

__version__ = '1.0.0'
