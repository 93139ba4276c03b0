"""
Application layer: unit of work, catalog service and use cases.
"""

from .unit_of_work import UnitOfWork

__all__ = ["UnitOfWork"]
