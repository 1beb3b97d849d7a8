"""
Service layer abstraction.

``GuitarService`` encapsulates the collection logic.  It owns the
in-memory list and talks to a ``Store``, so the API handlers never
touch persistence directly.
"""
