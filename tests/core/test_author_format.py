"""Tests for author formatting — pure record-to-string projection, no IO."""

from datetime import date, datetime
from types import SimpleNamespace

import pytest

from catalog.core.author_format import (
    extract_year, format_author_line, format_author_lines, format_full_name,
)
from catalog.core.errors import DataAccessFailure, MalformedRecordError
from catalog.schemas.author import AuthorRecord


def _record(**fields):
    defaults = {"date_of_birth": "1775-12-16", "date_of_death": "1817-07-18"}
    defaults.update(fields)
    return SimpleNamespace(**defaults)


# --- format_full_name ---------------------------------------------------------


def test_full_name_uses_family_comma_first():
    assert format_full_name("Mark", "Twain") == "Twain, Mark"


def test_full_name_without_family_name_is_first_name():
    assert format_full_name("Jane", None) == "Jane"
    assert format_full_name("Jane", "") == "Jane"


def test_full_name_with_empty_first_name_is_empty():
    assert format_full_name("", "Austen") == ""
    assert format_full_name(None, "Austen") == ""


def test_full_name_with_nothing_is_empty():
    assert format_full_name(None, None) == ""


# --- extract_year -------------------------------------------------------------


def test_extract_year_from_date():
    assert extract_year(date(1775, 12, 16)) == "1775"


def test_extract_year_from_datetime():
    assert extract_year(datetime(1835, 11, 30, 12, 0)) == "1835"


def test_extract_year_from_iso_strings():
    assert extract_year("1817-07-18") == "1817"
    assert extract_year("1910") == "1910"
    assert extract_year("1910-04-21T00:00:00.000Z") == "1910"


def test_extract_year_from_numeric_year():
    assert extract_year(1870) == "1870"
    assert extract_year(812) == "0812"


def test_extract_year_zero_pads_early_dates():
    assert extract_year(date(812, 1, 1)) == "0812"


@pytest.mark.parametrize("value", [None, "", "unknown", "17-07-1817", "12345", True, 3.5, 10000, -1])
def test_extract_year_rejects_non_dates(value):
    with pytest.raises(MalformedRecordError) as exc_info:
        extract_year(value, "date_of_birth")
    assert exc_info.value.field == "date_of_birth"
    assert isinstance(exc_info.value, DataAccessFailure)


# --- format_author_line -------------------------------------------------------


def test_line_for_missing_family_name():
    record = _record(first_name="Jane", family_name=None)
    assert format_author_line(record) == "Jane : 1775 - 1817"


def test_line_for_full_name():
    record = _record(
        first_name="Mark", family_name="Twain",
        date_of_birth="1835-11-30", date_of_death="1910-04-21",
    )
    assert format_author_line(record) == "Twain, Mark : 1835 - 1910"


def test_line_for_empty_first_name_keeps_leading_space():
    record = _record(
        first_name="", family_name="Austen",
        date_of_birth=date(1775, 12, 16), date_of_death=date(1817, 7, 18),
    )
    assert format_author_line(record) == " : 1775 - 1817"


def test_line_treats_absent_attributes_as_missing():
    record = SimpleNamespace(date_of_birth=1775, date_of_death=1817)
    assert format_author_line(record) == " : 1775 - 1817"


def test_line_accepts_pydantic_projection():
    record = AuthorRecord(
        first_name="Rabindranath", family_name="Tagore",
        date_of_birth=date(1812, 2, 7), date_of_death="1870-06-09",
    )
    assert format_author_line(record) == "Tagore, Rabindranath : 1812 - 1870"


def test_line_with_missing_death_date_raises():
    record = _record(first_name="Amitav", family_name="Ghosh", date_of_death=None)
    with pytest.raises(MalformedRecordError) as exc_info:
        format_author_line(record)
    assert exc_info.value.field == "date_of_death"


# --- format_author_lines ------------------------------------------------------


def test_lines_preserve_input_order():
    records = [
        _record(first_name="Rabindranath", family_name="Tagore"),
        _record(first_name="Jane", family_name="Austen"),
    ]
    assert format_author_lines(records) == [
        "Tagore, Rabindranath : 1775 - 1817",
        "Austen, Jane : 1775 - 1817",
    ]


def test_lines_for_no_records_is_empty():
    assert format_author_lines([]) == []
