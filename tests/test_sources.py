from decimal import Decimal

import pytest

from academics.models import Result, Timetable
from accounts.models import User
from finance.models import Fee
from reports.exceptions import UnsupportedReportKind
from reports.sources import REPORT_SOURCES, fetch_records
from school_admin.models import Notice

pytestmark = pytest.mark.django_db


@pytest.fixture
def family():
    parent = User.objects.create_user(
        username='jdoe', password='pw-12345', first_name='John', last_name='Doe',
        email='john@example.com', role='parent',
    )
    child = User.objects.create_user(
        username='jane', password='pw-12345', first_name='Jane', last_name='Doe',
        email='jane@example.com', role='student', grade='10', section='B', parent=parent,
    )
    return parent, child


def test_every_record_kind_is_registered():
    assert set(REPORT_SOURCES) == {
        'students', 'teachers', 'parents', 'fees', 'results', 'notices', 'timetable',
    }


def test_unknown_report_kind():
    with pytest.raises(UnsupportedReportKind):
        fetch_records('admissions')


def test_students_carry_parent_as_nested_reference(family):
    parent, child = family
    (record,) = list(fetch_records('students'))
    assert list(record)[0] == '_id'
    assert record['_id'] == child.pk
    assert record['grade'] == '10'
    assert record['parent'] == {'name': 'John Doe', 'email': 'john@example.com'}
    assert 'password' not in record


def test_parents_and_teachers(family):
    User.objects.create_user(username='mr_t', password='pw-12345', role='teacher', subject='Maths')
    (parent,) = list(fetch_records('parents'))
    assert parent['username'] == 'jdoe'
    (teacher,) = list(fetch_records('teachers'))
    assert teacher['subject'] == 'Maths'
    assert list(teacher)[:2] == ['_id', 'username']


def test_model_sources_expose_all_fields_in_order():
    fee = Fee.objects.create(student_id='7', student='Jane Doe', amount=Decimal('150.00'), date='2024-01-10')
    (record,) = list(fetch_records('fees'))
    assert list(record) == [
        '_id', 'student_id', 'student', 'term', 'amount', 'status', 'date',
        'fee_type', 'payment_method', 'paid_date', 'verified_by', 'notes',
    ]
    assert record['_id'] == fee.pk
    assert record['amount'] == Decimal('150.00')
    assert record['status'] == 'DUE'
    assert record['term'] is None


def test_results_notices_and_timetable():
    Result.objects.create(student_id='7', student='Jane', subject='Maths', exam='Mid', score=88, grade='A')
    Notice.objects.create(title='Sports Day', message='Friday', posted_by='Admin', date='2024-02-01')
    Timetable.objects.create(day='Mon', period='1', class_name='10B', subject='Maths', teacher='Mr T', room='4')

    assert [r['subject'] for r in fetch_records('results')] == ['Maths']
    assert [r['title'] for r in fetch_records('notices')] == ['Sports Day']
    assert [r['class_name'] for r in fetch_records('timetable')] == ['10B']
