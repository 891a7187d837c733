"""
Application package initializer.

The service is split into ``core`` (settings, logging, the MongoDB
store), ``schemas`` (request/response bodies), ``services`` (store
calls turned into explicit results) and ``api`` (the HTTP routes).
"""

from .main import app  # noqa: F401
