"""
Application package initializer.

The project is organised into small pieces: ``core`` holds
configuration, logging and security helpers, ``schemas`` the pydantic
models, ``services`` the in-memory store and ``api`` the routers.
"""

from .main import create_app  # noqa: F401
