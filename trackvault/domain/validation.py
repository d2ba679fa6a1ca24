"""Field validation rules for track records.

Pure predicates over user-supplied values. They never consult stored state,
so every mutation can be checked before anything is written. Text sizes are
measured in UTF-8 bytes and every upper bound is exclusive.
"""

from collections.abc import Sequence

from .errors import (
    InvalidCategoryError,
    InvalidLabelsError,
    InvalidLengthError,
    InvalidNameError,
    InvalidPerformerError,
)

# Exclusive upper bounds, in bytes
NAME_LIMIT = 65
PERFORMER_LIMIT = 33
CATEGORY_LIMIT = 33
LABEL_LIMIT = 25

# Exclusive upper bound, in seconds
LENGTH_LIMIT = 10000

MAX_LABELS = 8


def text_size(value: str) -> int:
    """Size of a text field as stored, in bytes."""
    return len(value.encode("utf-8"))


def is_valid_text(value: str, upper_bound: int) -> bool:
    """Check ``0 < size(value) < upper_bound``."""
    if not isinstance(value, str):
        return False
    return 0 < text_size(value) < upper_bound


def is_valid_name(name: str) -> bool:
    return is_valid_text(name, NAME_LIMIT)


def is_valid_performer(performer: str) -> bool:
    return is_valid_text(performer, PERFORMER_LIMIT)


def is_valid_category(category: str) -> bool:
    return is_valid_text(category, CATEGORY_LIMIT)


def is_valid_label(label: str) -> bool:
    return is_valid_text(label, LABEL_LIMIT)


def is_valid_length(length: int) -> bool:
    """Check ``0 < length < 10000``; booleans are not lengths."""
    if isinstance(length, bool) or not isinstance(length, int):
        return False
    return 0 < length < LENGTH_LIMIT


def is_valid_labels(labels: Sequence[str]) -> bool:
    """Check the label set holds 1-8 labels that all pass ``is_valid_label``."""
    if isinstance(labels, str):
        return False
    if not 0 < len(labels) <= MAX_LABELS:
        return False
    passing = sum(1 for label in labels if is_valid_label(label))
    return passing == len(labels)


def validate_track_details(
    name: str,
    length: int,
    category: str,
    labels: Sequence[str],
) -> None:
    """Validate the mutable descriptive fields of a track.

    Checks run in argument order and the first failure is raised.

    Raises:
        InvalidNameError, InvalidLengthError, InvalidCategoryError,
        InvalidLabelsError
    """
    if not is_valid_name(name):
        raise InvalidNameError(f"Track name must be 1-{NAME_LIMIT - 1} bytes")
    if not is_valid_length(length):
        raise InvalidLengthError(
            f"Track length must be between 1 and {LENGTH_LIMIT - 1} seconds"
        )
    if not is_valid_category(category):
        raise InvalidCategoryError(
            f"Track category must be 1-{CATEGORY_LIMIT - 1} bytes"
        )
    if not is_valid_labels(labels):
        raise InvalidLabelsError(
            f"Track labels must be 1-{MAX_LABELS} items of 1-{LABEL_LIMIT - 1} bytes"
        )


def validate_new_track(
    name: str,
    performer: str,
    length: int,
    category: str,
    labels: Sequence[str],
) -> None:
    """Validate every field of a track about to be registered.

    Order is name, performer, length, category, labels.

    Raises:
        InvalidNameError, InvalidPerformerError, InvalidLengthError,
        InvalidCategoryError, InvalidLabelsError
    """
    if not is_valid_name(name):
        raise InvalidNameError(f"Track name must be 1-{NAME_LIMIT - 1} bytes")
    if not is_valid_performer(performer):
        raise InvalidPerformerError(
            f"Track performer must be 1-{PERFORMER_LIMIT - 1} bytes"
        )
    validate_track_details(name, length, category, labels)
