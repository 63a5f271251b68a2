import pytest

from .helpers import RecordingSurface, linear_measure


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def measure():
    return linear_measure()


@pytest.fixture
def school_records():
    return [
        {
            '_id': 'a1',
            'name': 'Jane Doe',
            'email': 'jane@example.com',
            'grade': '10',
            'section': 'B',
            'parent': {'name': 'John Doe', 'email': 'john@example.com'},
            'password': 'hash',
            '__v': 0,
        },
        {
            '_id': 'a2',
            'name': 'Sam Lee',
            'email': 'sam@example.com',
            'grade': '11',
            'section': 'A',
            'parent': None,
            'password': 'hash',
            '__v': 0,
        },
    ]
