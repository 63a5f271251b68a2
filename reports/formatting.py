# reports/formatting.py
import json
from datetime import date, datetime
from collections.abc import Mapping


def format_value(value):
    """
    Convert a record field into the text shown in a table cell.

    Nested references (populated relations) collapse to their ``name``
    field; anything else composite is dumped as compact JSON.
    """
    if value is None:
        return ''

    if isinstance(value, Mapping):
        if value.get('name'):
            return str(value['name'])
        return compact_json(value)

    if isinstance(value, (list, tuple)):
        return compact_json(value)

    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, (date, datetime)):
        return value.isoformat()

    return str(value)


def compact_json(value):
    return json.dumps(value, sort_keys=True, separators=(',', ':'), default=str)
