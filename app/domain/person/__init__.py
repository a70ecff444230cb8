"""
Person bounded context: domain layer.

This module contains all domain logic for person records:
- The Person entity and pagination value objects
- The naming grammar
- The storage port
- Domain errors
"""
