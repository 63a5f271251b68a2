# reports/columns.py
import re
from dataclasses import dataclass

from .formatting import format_value

# Fields never shown in a PDF table. Kept as an explicit list so it can be
# audited; new sensitive field names must be added here by hand.
RESERVED_PREFIX = '_'
VERSION_MARKER = '__v'
SECRET_FIELDS = frozenset({'password'})

MAX_CONTENT_LENGTH = 60


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    content_width_hint: int = 0


def is_displayable(key):
    if key.startswith(RESERVED_PREFIX) or key == VERSION_MARKER:
        return False
    return key not in SECRET_FIELDS


def display_name(key):
    """Turn ``feeType`` into ``Fee Type``. Underscores are left alone."""
    spaced = re.sub(r'([A-Z])', r' \1', key)
    if spaced:
        spaced = spaced[0].upper() + spaced[1:]
    return spaced.strip()


def longest_value(sample, key):
    return max((len(format_value(record.get(key))) for record in sample), default=0)


def infer_columns(sample):
    """
    Derive the table columns from the first record of ``sample``.

    Column order follows that record's key order. An empty sample gives
    an empty list; callers treat that as "no data".
    """
    if not sample:
        return []

    columns = []
    for key in sample[0].keys():
        if not is_displayable(key):
            continue
        hint = min(MAX_CONTENT_LENGTH, longest_value(sample, key))
        columns.append(Column(key=key, label=display_name(key), content_width_hint=hint))
    return columns
