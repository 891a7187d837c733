"""
HTTP layer of the service.

``router.py`` aggregates the endpoint modules from ``endpoints`` into a
single router that ``main.create_app`` includes.
"""
