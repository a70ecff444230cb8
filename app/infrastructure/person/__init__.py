"""
Infrastructure adapters for the person bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system.
"""
