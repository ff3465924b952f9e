"""Domain Types — identity wrapper and constants."""

from pbxgraph.core.domain_types import (
    DEFAULT_UUID_LENGTH,
    MAX_UUID_LENGTH,
    MIN_UUID_LENGTH,
    ObjectUUID,
)


def test_object_uuid_wraps_str():
    assert ObjectUUID("ABC") == "ABC"


def test_uuid_length_bounds_are_consistent():
    assert MIN_UUID_LENGTH <= DEFAULT_UUID_LENGTH <= MAX_UUID_LENGTH
