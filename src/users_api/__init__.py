"""Users API.

Layered CRUD service for user records: FastAPI routers on top of a
business service, which talks to persistence through a repository.
"""

__version__ = "0.1.0"
