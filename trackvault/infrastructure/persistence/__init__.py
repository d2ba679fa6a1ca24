"""Persistence layer: SQLAlchemy models, repositories and transaction boundaries."""

from trackvault.infrastructure.persistence.store import CatalogStore
from trackvault.infrastructure.persistence.unit_of_work import DatabaseUnitOfWork

__all__ = [
    "CatalogStore",
    "DatabaseUnitOfWork",
]
