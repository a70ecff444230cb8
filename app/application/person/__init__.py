"""
Application layer for the person bounded context.

The person service coordinates the naming grammar and the storage port
to fulfill CRUD operations. No framework or infrastructure imports allowed.
"""
