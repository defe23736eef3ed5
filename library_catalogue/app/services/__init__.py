"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services talk
to the in-memory store, so swapping it for a database does not
require changes to the API handlers.
"""
