import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from infrastructure.ranges import Bound, MalformedRangeLiteral, TstzRange, TstzRangeError
from infrastructure.ranges.codec import normalize_instant_text

JAN_1 = datetime(2024, 1, 1, tzinfo=timezone.utc)
JAN_2 = datetime(2024, 1, 2, tzinfo=timezone.utc)


def test_datetime_range_renders_full_offset():
    period = TstzRange.from_datetime_range(JAN_1, JAN_2)

    literal = period.to_text()

    assert literal == "[2024-01-01T00:00:00+00:00,2024-01-02T00:00:00+00:00)"
    assert str(period) == literal
    decoded = TstzRange.from_text(literal)
    assert decoded == period
    assert decoded.is_start_inclusive()
    assert not decoded.is_end_inclusive()


def test_unbounded_start_with_inclusive_end():
    decoded = TstzRange.from_text("(,2024-06-01T12:00:00+00:00]")

    assert decoded.start == Bound.unbounded()
    assert decoded.end == Bound.inclusive(datetime(2024, 6, 1, 12, tzinfo=timezone.utc))


def test_compact_offset_matches_full_offset():
    compact = TstzRange.from_text("[2024-01-01T00:00:00+00,)")
    full = TstzRange.from_text("[2024-01-01T00:00:00+00:00,)")

    assert compact.lower == full.lower == JAN_1
    assert compact == full


def test_unbounded_sides_render_bare_delimiters():
    assert TstzRange(Bound.unbounded(), Bound.unbounded()).to_text() == "(,)"
    assert TstzRange(Bound.exclusive(JAN_1), Bound.unbounded()).to_text() == "(2024-01-01T00:00:00+00:00,)"
    assert TstzRange(Bound.unbounded(), Bound.inclusive(JAN_2)).to_text() == "(,2024-01-02T00:00:00+00:00]"


@pytest.mark.parametrize(
    "period",
    [
        TstzRange(Bound.unbounded(), Bound.unbounded()),
        TstzRange(Bound.unbounded(), Bound.exclusive(JAN_2)),
        TstzRange(Bound.inclusive(JAN_1), Bound.unbounded()),
        TstzRange(Bound.exclusive(JAN_1), Bound.inclusive(JAN_2)),
        TstzRange.from_instant_pair(
            datetime(2024, 3, 10, 8, 30, 15, 123456, tzinfo=timezone.utc),
            datetime(2024, 3, 10, 9, 0, tzinfo=timezone(timedelta(hours=-5))),
        ),
    ],
)
def test_encoded_ranges_decode_to_the_same_value(period):
    assert TstzRange.from_text(period.to_text()) == period


def test_encoding_normalizes_to_utc():
    tokyo = timezone(timedelta(hours=9))
    period = TstzRange.from_instant_pair(
        datetime(2024, 1, 1, 9, tzinfo=tokyo),
        datetime(2024, 1, 2, 9, tzinfo=tokyo),
    )

    assert period.to_text() == "[2024-01-01T00:00:00+00:00,2024-01-02T00:00:00+00:00)"


def test_decodes_quoted_server_output():
    decoded = TstzRange.from_text('["2024-01-01 00:00:00+00","2024-01-02 00:00:00+00")')

    assert decoded == TstzRange.from_instant_pair(JAN_1, JAN_2)


def test_decodes_zulu_and_fractional_seconds():
    decoded = TstzRange.from_text('("2024-01-01 00:00:00.250+00",2024-01-02T00:00:00Z]')

    assert decoded.start == Bound.exclusive(JAN_1 + timedelta(milliseconds=250))
    assert decoded.end == Bound.inclusive(JAN_2)


def test_decodes_non_utc_offsets_into_utc():
    decoded = TstzRange.from_text("[2024-01-01T05:00:00+05,)")

    assert decoded.lower == JAN_1
    assert decoded.lower.utcoffset() == timedelta(0)


def test_quotes_are_stripped_independently():
    assert normalize_instant_text('"2024-01-01T00:00:00+00:00') == "2024-01-01T00:00:00+00:00"
    assert normalize_instant_text('2024-01-01T00:00:00+00:00"') == "2024-01-01T00:00:00+00:00"
    assert normalize_instant_text("2024-01-01T00:00:00+00") == "2024-01-01T00:00:00+00:00"
    assert normalize_instant_text("2024-01-01T00:00:00-07") == "2024-01-01T00:00:00-07:00"


@pytest.mark.parametrize(
    "literal",
    [
        "",
        "empty",
        "[2024-01-01T00:00:00+00:00 2024-01-02T00:00:00+00:00)",
        "[2024-01-01T00:00:00+00:00,2024-01-02T00:00:00+00:00,2024-01-03T00:00:00+00:00)",
        "{2024-01-01T00:00:00+00:00,2024-01-02T00:00:00+00:00)",
        "[2024-01-01T00:00:00+00:00,2024-01-02T00:00:00+00:00>",
        ",2024-01-02T00:00:00+00:00)",
        "[2024-01-01T00:00:00+00:00,",
        "[,)",
        "(,]",
        "[not-a-date,)",
        "[2024-13-01T00:00:00+00:00,)",
        "[2024-01-01T00:00:00,)",
        "[2024-01-01,)",
        "[infinity,)",
        "[2024-W01-1T00:00:00+00:00,)",
        "[20240101T000000+0000,)",
        "[2024-01-01T00+00:00,)",
        "[2024-01-01T00:00:00+0000,)",
        "[2024-01-01T00:00+00:00,)",
        "[0001-01-01T00:00:00+01:00,)",
        "(,9999-12-31T23:00:00-02:00]",
    ],
)
def test_malformed_literals_are_rejected(literal):
    with pytest.raises(MalformedRangeLiteral):
        TstzRange.from_text(literal)


def test_malformed_literal_is_a_value_error():
    with pytest.raises(ValueError) as excinfo:
        TstzRange.from_text("[2024-02-30T00:00:00+00:00,)")

    assert isinstance(excinfo.value, TstzRangeError)
    assert excinfo.value.literal == "[2024-02-30T00:00:00+00:00,)"
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_out_of_range_instant_is_a_malformed_literal():
    with pytest.raises(MalformedRangeLiteral) as excinfo:
        TstzRange.from_text("[0001-01-01T00:00:00+01:00,)")

    assert isinstance(excinfo.value.__cause__, OverflowError)


def test_compact_four_digit_offset_is_not_rfc3339():
    with pytest.raises(MalformedRangeLiteral) as excinfo:
        TstzRange.from_text("[2024-01-01T00:00:00+0000,)")

    assert "RFC 3339" in str(excinfo.value)
