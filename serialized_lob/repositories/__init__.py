from .customer_repository import CustomerRepository
