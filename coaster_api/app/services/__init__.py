"""
Service layer.

Services encapsulate state and business logic so that API handlers
only translate between HTTP and domain calls.
"""
