"""
Shared module package.

Cross-cutting concerns used by every layer of the HTTP service:
error mapping and handlers, security headers, rate limiting and
logging configuration.
"""
