"""Tests for the string-dialect column types."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from shopstore.domain.models import MAX_DATETIME, NULL_DATETIME, MalformedTimestampError
from shopstore.infrastructure.persistence.models.types import (
    StringDateTime,
    StringInteger,
    StringNumeric,
)


# --- StringDateTime ---

def test_datetime_binds_naive_utc():
    bound = StringDateTime().process_bind_param("2024-05-06 07:08:09", None)
    assert bound == datetime(2024, 5, 6, 7, 8, 9)
    assert bound.tzinfo is None


def test_datetime_empty_binds_null():
    assert StringDateTime().process_bind_param("", None) is None


def test_datetime_passes_datetime_through():
    value = datetime(2024, 1, 1)
    assert StringDateTime().process_bind_param(value, None) is value


def test_datetime_malformed_raises():
    with pytest.raises(MalformedTimestampError):
        StringDateTime().process_bind_param("yesterday", None)


@pytest.mark.parametrize("value", [MAX_DATETIME, NULL_DATETIME])
def test_datetime_sentinels_survive_storage(value):
    column = StringDateTime()
    assert column.process_result_value(column.process_bind_param(value, None), None) == value


def test_datetime_result_converts_aware_to_utc():
    value = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
    assert StringDateTime().process_result_value(value, None) == "2024-01-01 12:00:00"


def test_datetime_null_reads_none():
    assert StringDateTime().process_result_value(None, None) is None


# --- StringNumeric ---

def test_numeric_binds_decimal():
    assert StringNumeric().process_bind_param("19.99", None) == Decimal("19.99")


def test_numeric_rejects_garbage():
    with pytest.raises(ValueError):
        StringNumeric().process_bind_param("cheap", None)


@pytest.mark.parametrize(
    "stored, expected",
    [(Decimal("19.9900"), "19.99"), (Decimal("10.00"), "10"), (Decimal("0.00"), "0"), (Decimal("-0.00"), "0")],
)
def test_numeric_reads_canonical_string(stored, expected):
    assert StringNumeric().process_result_value(stored, None) == expected


# --- StringInteger ---

def test_integer_round_trip():
    column = StringInteger()
    assert column.process_bind_param("42", None) == 42
    assert column.process_result_value(42, None) == "42"


def test_integer_empty_binds_null():
    assert StringInteger().process_bind_param("", None) is None


def test_numeric_keeps_every_decimal():
    column = StringNumeric()
    assert column.process_result_value(column.process_bind_param("19.999", None), None) == "19.999"
    assert column.process_result_value(Decimal("0.00000000001"), None) == "0.00000000001"
