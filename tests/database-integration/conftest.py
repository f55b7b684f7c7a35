"""
Shared helpers for database integration tests.

These tests need a running database. They are skipped unless the matching
environment variables are set.
"""

import os

from serialized_lob.models import Customer, Department


def get_mysql_config():
    """
    MySQL config from environment variables.

    Required env vars:
    - MYSQL_HOST
    - MYSQL_PORT
    - MYSQL_USER
    - MYSQL_PASSWORD
    - MYSQL_DATABASE

    Returns None if any required env var is missing.
    """
    required_vars = ['MYSQL_HOST', 'MYSQL_PORT', 'MYSQL_USER', 'MYSQL_PASSWORD', 'MYSQL_DATABASE']
    if not all(os.getenv(var) for var in required_vars):
        return None

    return {
        'host': os.getenv('MYSQL_HOST'),
        'port': int(os.getenv('MYSQL_PORT')),
        'user': os.getenv('MYSQL_USER'),
        'password': os.getenv('MYSQL_PASSWORD'),
        'database': os.getenv('MYSQL_DATABASE')
    }


def get_postgres_config():
    """
    PostgreSQL config from environment variables.

    Required env vars:
    - POSTGRES_HOST
    - POSTGRES_PORT
    - POSTGRES_USER
    - POSTGRES_PASSWORD
    - POSTGRES_DATABASE

    Returns None if any required env var is missing.
    """
    required_vars = ['POSTGRES_HOST', 'POSTGRES_PORT', 'POSTGRES_USER', 'POSTGRES_PASSWORD', 'POSTGRES_DATABASE']
    if not all(os.getenv(var) for var in required_vars):
        return None

    return {
        'host': os.getenv('POSTGRES_HOST'),
        'port': int(os.getenv('POSTGRES_PORT')),
        'user': os.getenv('POSTGRES_USER'),
        'password': os.getenv('POSTGRES_PASSWORD'),
        'database': os.getenv('POSTGRES_DATABASE')
    }


def build_customer(name="integration customer"):
    """A customer with a two-root, three-level department forest."""
    customer = Customer(name)
    engineering = Department("Engineering")
    platform = engineering.add_child(Department("Platform"))
    platform.add_child(Department("Storage"))
    customer.departments.append(engineering)
    customer.departments.append(Department("Sales & Marketing"))
    return customer
