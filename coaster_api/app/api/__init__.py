"""
API package.

``router`` aggregates the domain routers; ``deps`` holds the shared
dependencies that connect handlers to application state.
"""
