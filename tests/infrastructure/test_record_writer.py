"""Tests for CsvRecordWriter."""

from __future__ import annotations

import io
from decimal import Decimal

from fare_collector.domain.records import FlatRecord
from fare_collector.infrastructure.record_writer import CsvRecordWriter


def make_record(**overrides) -> FlatRecord:
    fields = {
        "origin_id": 8000105,
        "destination_id": 8010085,
        "departure": 1531717200,
        "arrival": 1531731600,
        "collected_at": 1531700000,
        "price": Decimal("49.9"),
        "origin_code": "8000105",
        "destination_code": "8010085",
        "origin_name": "Frankfurt(Main)Hbf",
        "destination_name": "Dresden Hbf",
        "transfers": 0,
    }
    fields.update(overrides)
    return FlatRecord(**fields)


def test_writes_one_line_per_record_in_column_order() -> None:
    stream = io.StringIO()

    written = CsvRecordWriter(stream).write([make_record(), make_record(transfers=2)])

    assert written == 2
    assert stream.getvalue().splitlines() == [
        "8000105,8010085,1531717200,1531731600,1531700000,49.90,8000105,8010085,"
        "Frankfurt(Main)Hbf,Dresden Hbf,0",
        "8000105,8010085,1531717200,1531731600,1531700000,49.90,8000105,8010085,"
        "Frankfurt(Main)Hbf,Dresden Hbf,2",
    ]
    assert stream.getvalue().endswith("\n")


def test_no_records_writes_nothing() -> None:
    stream = io.StringIO()

    assert CsvRecordWriter(stream).write([]) == 0
    assert stream.getvalue() == ""


def test_names_with_commas_are_quoted() -> None:
    stream = io.StringIO()

    CsvRecordWriter(stream).write([make_record(destination_name="Halle (Saale), Hbf")])

    assert '"Halle (Saale), Hbf"' in stream.getvalue()
