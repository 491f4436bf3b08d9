"""
Top-level package for the Coaster API.

All functionality lives in submodules under ``app``; the application
itself is built with ``coaster_api.app.main.create_app``.
"""

__all__ = []
