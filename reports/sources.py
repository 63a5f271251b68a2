# reports/sources.py
"""
Record collections that can be exported as reports.

Each source returns plain dicts in a stable field order, the primary key
exposed as ``_id`` the way the document store used to hand records over.
"""
from accounts.models import User
from academics.models import Result, Timetable
from finance.models import Fee
from school_admin.models import Notice

from .exceptions import UnsupportedReportKind

USER_FIELDS = ('id', 'username', 'first_name', 'last_name', 'email', 'mobile', 'role')


def as_document(values):
    record = {'_id': values.pop('id')}
    record.update(values)
    return record


def students():
    queryset = User.objects.filter(role='student').select_related('parent').order_by('id')
    for user in queryset.iterator():
        record = {'_id': user.pk}
        for name in USER_FIELDS[1:]:
            record[name] = getattr(user, name)
        record['grade'] = user.grade
        record['section'] = user.section
        record['parent'] = (
            {'name': user.parent.name, 'email': user.parent.email} if user.parent else None
        )
        yield record


def teachers():
    queryset = User.objects.filter(role='teacher').order_by('id').values(*USER_FIELDS, 'subject')
    return (as_document(values) for values in queryset.iterator())


def parents():
    queryset = User.objects.filter(role='parent').order_by('id').values(*USER_FIELDS)
    return (as_document(values) for values in queryset.iterator())


def _model_source(model):
    def source():
        fields = [field.attname for field in model._meta.concrete_fields]
        return (as_document(values) for values in model.objects.values(*fields).iterator())
    source.__name__ = model.__name__.lower()
    return source


REPORT_SOURCES = {
    'students': students,
    'teachers': teachers,
    'parents': parents,
    'fees': _model_source(Fee),
    'results': _model_source(Result),
    'notices': _model_source(Notice),
    'timetable': _model_source(Timetable),
}


def fetch_records(report_name):
    try:
        source = REPORT_SOURCES[report_name]
    except KeyError:
        raise UnsupportedReportKind(report_name) from None
    return source()
