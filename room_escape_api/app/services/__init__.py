"""
Service layer.

Each service encapsulates the business logic for one domain and works
against the repositories in ``app.repositories``.  API handlers only
build services and translate requests into service calls.
"""
