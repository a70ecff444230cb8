"""
HTTP interface for the person bounded context.

The route table lives in router.py; parameter binding and the
composition root live in dependencies.py.
"""
