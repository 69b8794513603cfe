"""Product catalog API.

A small CRUD service for products: FastAPI routers in front of a service
layer that reads through an in-memory TTL cache before falling back to a
SQLModel repository.
"""

__version__ = "0.1.0"
