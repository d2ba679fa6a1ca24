"""trackvault domain layer - pure business logic with zero infrastructure dependencies."""

from . import authorization, entities, errors, validation
from .entities import AccessGrant, TrackRecord
from .errors import (
    AccessForbiddenError,
    AdminRestrictedError,
    AlreadyExistsError,
    CatalogError,
    ErrorKind,
    InvalidCategoryError,
    InvalidFieldError,
    InvalidLabelsError,
    InvalidLengthError,
    InvalidNameError,
    InvalidPerformerError,
    LimitedOperationError,
    NoPermissionError,
    NotFoundError,
)

__all__ = [
    # Modules
    "authorization",
    "entities",
    "errors",
    "validation",
    # Entities
    "AccessGrant",
    "TrackRecord",
    # Errors
    "AccessForbiddenError",
    "AdminRestrictedError",
    "AlreadyExistsError",
    "CatalogError",
    "ErrorKind",
    "InvalidCategoryError",
    "InvalidFieldError",
    "InvalidLabelsError",
    "InvalidLengthError",
    "InvalidNameError",
    "InvalidPerformerError",
    "LimitedOperationError",
    "NoPermissionError",
    "NotFoundError",
]
