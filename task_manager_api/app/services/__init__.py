"""
Service layer abstraction.

Services wrap the persistence store and hand explicit result objects
back to the API handlers.
"""
