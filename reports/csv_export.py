# reports/csv_export.py
import csv
from collections.abc import Mapping
from datetime import date, datetime

from .formatting import compact_json


class Echo:
    """File-like object whose write() hands the line back instead of storing it."""

    def write(self, value):
        return value


def csv_cell(value):
    """Raw field value for CSV; composites, dates and bools are spelled the same way the PDF spells them."""
    if value is None:
        return ''
    if isinstance(value, (Mapping, list, tuple)):
        return compact_json(value)
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def iter_csv_lines(records):
    """
    Yield CSV lines for ``records``: a header of the first record's raw
    field names, then one line per record. Nothing is filtered or relabelled.
    """
    records = iter(records)
    first = next(records, None)
    if first is None:
        return

    fieldnames = list(first.keys())
    writer = csv.writer(Echo())
    yield writer.writerow(fieldnames)
    yield writer.writerow([csv_cell(first.get(key)) for key in fieldnames])
    for record in records:
        yield writer.writerow([csv_cell(record.get(key)) for key in fieldnames])
