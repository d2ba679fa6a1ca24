"""Tests for track field validation rules."""

import pytest

from trackvault.domain.errors import (
    InvalidCategoryError,
    InvalidFieldError,
    InvalidLabelsError,
    InvalidLengthError,
    InvalidNameError,
    InvalidPerformerError,
)
from trackvault.domain.validation import (
    is_valid_category,
    is_valid_label,
    is_valid_labels,
    is_valid_length,
    is_valid_name,
    is_valid_performer,
    text_size,
    validate_new_track,
    validate_track_details,
)


class TestTextBounds:
    """Text fields are measured in UTF-8 bytes with exclusive upper bounds."""

    def test_name_bounds(self):
        assert is_valid_name("a")
        assert is_valid_name("a" * 64)
        assert not is_valid_name("a" * 65)
        assert not is_valid_name("")

    def test_name_counts_bytes_not_characters(self):
        # "é" is two bytes in UTF-8
        assert text_size("é") == 2
        assert is_valid_name("é" * 32)
        assert not is_valid_name("é" * 33)

    def test_performer_and_category_bounds(self):
        assert is_valid_performer("p" * 32)
        assert not is_valid_performer("p" * 33)
        assert not is_valid_performer("")
        assert is_valid_category("c" * 32)
        assert not is_valid_category("c" * 33)
        assert not is_valid_category("")

    def test_label_bounds(self):
        assert is_valid_label("l" * 24)
        assert not is_valid_label("l" * 25)
        assert not is_valid_label("")

    def test_non_string_is_invalid(self):
        assert not is_valid_name(None)
        assert not is_valid_name(42)


class TestLengthBounds:
    @pytest.mark.parametrize("length", [1, 9999])
    def test_valid_lengths(self, length):
        assert is_valid_length(length)

    @pytest.mark.parametrize("length", [0, 10000, -1])
    def test_invalid_lengths(self, length):
        assert not is_valid_length(length)

    def test_bool_is_not_a_length(self):
        assert not is_valid_length(True)


class TestLabelSet:
    def test_eight_labels_accepted(self):
        assert is_valid_labels([f"label{i}" for i in range(8)])

    def test_nine_labels_rejected(self):
        assert not is_valid_labels([f"label{i}" for i in range(9)])

    def test_empty_set_rejected(self):
        assert not is_valid_labels([])

    def test_single_bad_label_rejects_the_set(self):
        labels = [f"label{i}" for i in range(7)] + [""]
        assert not is_valid_labels(labels)

    def test_bare_string_rejected(self):
        assert not is_valid_labels("rock")


class TestValidateNewTrack:
    """Checks run in name, performer, length, category, labels order."""

    def test_valid_fields_pass(self):
        validate_new_track("Song", "Artist", 180, "rock", ["live"])

    def test_first_failure_wins(self):
        with pytest.raises(InvalidNameError):
            validate_new_track("", "", 0, "", [])

    def test_performer_checked_before_length(self):
        with pytest.raises(InvalidPerformerError):
            validate_new_track("Song", "", 0, "rock", ["live"])

    def test_length_checked_before_category(self):
        with pytest.raises(InvalidLengthError):
            validate_new_track("Song", "Artist", 10000, "", ["live"])

    def test_category_checked_before_labels(self):
        with pytest.raises(InvalidCategoryError):
            validate_new_track("Song", "Artist", 180, "", [])

    def test_labels_error(self):
        with pytest.raises(InvalidLabelsError):
            validate_new_track("Song", "Artist", 180, "rock", [])

    def test_field_errors_share_a_base(self):
        with pytest.raises(InvalidFieldError):
            validate_new_track("Song", "p" * 40, 180, "rock", ["live"])


class TestValidateTrackDetails:
    def test_valid_details_pass(self):
        validate_track_details("Song", 1, "rock", ["a"])

    def test_invalid_name(self):
        with pytest.raises(InvalidNameError):
            validate_track_details("n" * 65, 180, "rock", ["a"])
