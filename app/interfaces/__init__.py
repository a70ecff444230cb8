"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas and request
parameter binding. No business logic belongs here.
Routes call the application services and return responses.
"""
