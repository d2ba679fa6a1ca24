"""Domain error taxonomy for catalog operations.

Every failed operation surfaces as exactly one of these exceptions. Each
class carries an ``ErrorKind`` so callers can branch on the outcome without
matching class names. None of them is retried anywhere in the library.
"""

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Terminal outcome kinds for catalog operations."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_NAME = "invalid_name"
    INVALID_PERFORMER = "invalid_performer"
    INVALID_CATEGORY = "invalid_category"
    INVALID_LENGTH = "invalid_length"
    INVALID_LABELS = "invalid_labels"
    NO_PERMISSION = "no_permission"
    ACCESS_FORBIDDEN = "access_forbidden"
    ADMIN_RESTRICTED = "admin_restricted"
    LIMITED_OPERATION = "limited_operation"


class CatalogError(RuntimeError):
    """Base exception for every catalog operation failure."""

    kind: ClassVar[ErrorKind]


class NotFoundError(CatalogError):
    """Raised when a referenced track or grant record does not exist."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(CatalogError):
    """Reserved for duplicate inserts; registration always allocates a fresh id."""

    kind = ErrorKind.ALREADY_EXISTS


class InvalidFieldError(CatalogError):
    """Base exception for a user-supplied field failing its bounds."""


class InvalidNameError(InvalidFieldError):
    """Raised when a track name is empty or longer than 64 bytes."""

    kind = ErrorKind.INVALID_NAME


class InvalidPerformerError(InvalidFieldError):
    """Raised when a performer is empty or longer than 32 bytes."""

    kind = ErrorKind.INVALID_PERFORMER


class InvalidCategoryError(InvalidFieldError):
    """Raised when a category is empty or longer than 32 bytes."""

    kind = ErrorKind.INVALID_CATEGORY


class InvalidLengthError(InvalidFieldError):
    """Raised when a track length is outside 1..9999 seconds."""

    kind = ErrorKind.INVALID_LENGTH


class InvalidLabelsError(InvalidFieldError):
    """Raised when the label set is empty, too large, or has a bad label."""

    kind = ErrorKind.INVALID_LABELS


class NoPermissionError(CatalogError):
    """Raised when the caller is not the track's current creator."""

    kind = ErrorKind.NO_PERMISSION


class AccessForbiddenError(CatalogError):
    """Raised when a required access grant is absent or false."""

    kind = ErrorKind.ACCESS_FORBIDDEN


class AdminRestrictedError(CatalogError):
    """Reserved for administrative gating; not raised by any operation yet."""

    kind = ErrorKind.ADMIN_RESTRICTED


class LimitedOperationError(CatalogError):
    """Reserved for administrative gating; not raised by any operation yet."""

    kind = ErrorKind.LIMITED_OPERATION
