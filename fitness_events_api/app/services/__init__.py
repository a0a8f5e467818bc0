"""
Service layer abstraction.

Each service encapsulates the business logic for a domain and talks to
the database through ``core.db``.  Routes stay thin: they call a
service and translate its result or error into an HTTP response.
"""
