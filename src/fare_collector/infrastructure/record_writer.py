"""CSV output of flat records."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from typing import TextIO

from ..domain.records import FlatRecord


class CsvRecordWriter:
    """Write one comma-separated, newline-terminated line per record, no header."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._writer = csv.writer(stream, lineterminator="\n")

    def write(self, records: Iterable[FlatRecord]) -> int:
        count = 0
        for record in records:
            self._writer.writerow(record.as_row())
            count += 1
        self._stream.flush()
        return count
