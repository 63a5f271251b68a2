import csv
import io
from datetime import date, datetime

import pytest

from reports.exceptions import NoData, StreamFailure
from reports.formatting import format_value
from reports.renderer import ReportExport, chunked, file_chunks, render, report_title

from .helpers import make_records

GENERATED_AT = datetime(2024, 5, 1, 8, 30, 0)


def body(export):
    return b''.join(export.stream())


def test_report_title():
    assert report_title('students') == 'Students Report'
    assert report_title('timetable') == 'Timetable Report'


@pytest.mark.parametrize('fmt', ['pdf', 'csv'])
def test_empty_records_raise_no_data(fmt):
    with pytest.raises(NoData):
        render('fees', [], fmt)
    with pytest.raises(NoData):
        render('fees', iter(()), fmt)


def test_csv_has_raw_header_and_one_line_per_record(school_records):
    export = render('students', school_records, 'csv')
    assert export.content_type == 'text/csv'
    assert export.content_disposition == 'attachment; filename=students.csv'

    rows = list(csv.reader(io.StringIO(body(export).decode('utf-8'))))
    assert len(rows) == len(school_records) + 1
    # csv keeps raw keys, including the fields the pdf hides
    assert rows[0] == ['_id', 'name', 'email', 'grade', 'section', 'parent', 'password', '__v']
    assert rows[1][5] == '{"email":"john@example.com","name":"John Doe"}'
    assert rows[2][5] == ''


def test_csv_escapes_awkward_values():
    records = [{'title': 'Sports, day', 'message': 'Line one\nLine "two"'}]
    rows = list(csv.reader(io.StringIO(body(render('notices', records, 'csv')).decode('utf-8'))))
    assert rows == [['title', 'message'], ['Sports, day', 'Line one\nLine "two"']]


def test_csv_streams_large_collections_in_chunks():
    records = make_records(2000, fields=3)
    export = render('results', records, 'csv')
    chunks = list(export.stream())
    assert len(chunks) > 1
    text = b''.join(chunks).decode('utf-8')
    assert len(list(csv.reader(io.StringIO(text)))) == 2001
    assert export.bytes_sent == len(text.encode('utf-8'))


def test_pdf_headers_and_content(school_records):
    export = render('students', school_records, 'pdf', generated_at=GENERATED_AT)
    data = body(export)
    assert export.content_type == 'application/pdf'
    assert export.content_disposition == 'attachment; filename=students.pdf'
    assert data.startswith(b'%PDF')
    assert data.rstrip().endswith(b'%%EOF')
    assert export.rows == 2
    assert export.pages == 1


def test_unknown_format_falls_back_to_pdf(school_records):
    export = render('students', school_records, 'xlsx', generated_at=GENERATED_AT)
    assert export.format == 'pdf'
    assert body(export).startswith(b'%PDF')


def test_pdf_renders_every_record_beyond_the_sample():
    records = (record for record in make_records(450, fields=8))
    export = render('fees', records, 'pdf', generated_at=GENERATED_AT)
    assert export.rows == 450
    assert export.pages > 1


def test_rendering_is_repeatable():
    records = make_records(120, fields=5)
    first = body(render('results', records, 'pdf', generated_at=GENERATED_AT))
    second = body(render('results', records, 'pdf', generated_at=GENERATED_AT))
    assert first == second

    assert body(render('results', records, 'csv')) == body(render('results', records, 'csv'))


def test_records_with_only_hidden_fields_have_no_columns():
    with pytest.raises(NoData):
        render('fees', [{'_id': 1, 'password': 'x'}], 'pdf', generated_at=GENERATED_AT)


def test_failure_before_first_byte_is_raised_unchanged():
    def chunks():
        raise OSError("disk gone")
        yield b''

    export = ReportExport('fees', 'pdf', chunks())
    with pytest.raises(OSError):
        body(export)
    assert not export.started


def test_failure_after_first_byte_becomes_stream_failure(caplog):
    def chunks():
        yield b'%PDF-1.4'
        raise ConnectionResetError("client went away")

    export = ReportExport('fees', 'pdf', chunks())
    stream = export.stream()
    assert next(stream) == b'%PDF-1.4'
    with pytest.raises(StreamFailure):
        next(stream)
    assert export.started
    assert 'failed after 8 bytes' in caplog.text


def test_chunked_regroups_bytes():
    assert list(chunked([b'ab', b'cd', b'e'], 3)) == [b'abcd', b'e']
    assert list(chunked([], 3)) == []


def test_csv_spells_values_like_the_pdf():
    paid_at = datetime(2024, 3, 5, 14, 0, 0)
    record = {
        'paid_at': paid_at,
        'due': date(2024, 3, 1),
        'meta': {'ref': 'TX-1', 'amount': '100.00'},
        'tags': ['late', 'card'],
        'waived': False,
        'notes': None,
    }
    rows = list(csv.reader(io.StringIO(body(render('fees', [record], 'csv')).decode('utf-8'))))
    assert rows[1] == [format_value(value) for value in record.values()]
    assert rows[1][:4] == ['2024-03-05T14:00:00', '2024-03-01', '{"amount":"100.00","ref":"TX-1"}', '["late","card"]']


def test_pdf_is_served_from_the_spool_in_chunks(settings):
    settings.REPORT_EXPORT = {'CHUNK_SIZE': 1024, 'SPOOL_SIZE': 1}
    export = render('results', make_records(60, fields=4), 'pdf', generated_at=GENERATED_AT)
    chunks = list(export.stream())
    assert len(chunks) > 1
    assert all(len(chunk) <= 1024 for chunk in chunks)
    data = b''.join(chunks)
    assert data.startswith(b'%PDF')
    assert export.bytes_sent == len(data)


def test_file_chunks_closes_the_handle():
    handle = io.BytesIO(b'abcdefg')
    handle.seek(4)
    assert list(file_chunks(handle, 3)) == [b'abc', b'def', b'g']
    assert handle.closed
