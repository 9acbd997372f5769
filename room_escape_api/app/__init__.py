"""
Application package initializer.

The project is organised by layer: ``core`` holds configuration,
database access, security and error handling; ``repositories`` wrap
the SQLite tables; ``services`` contain the business rules; ``schemas``
define the API payloads; ``api/v1/endpoints`` exposes the routers.
"""

from .main import app  # noqa: F401
