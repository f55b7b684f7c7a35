"""
Models for serialized_lob
"""

from .department import Department
from .customer import Customer, NO_ID
