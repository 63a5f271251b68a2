# reports/renderer.py
import logging
from dataclasses import dataclass, field
import tempfile
from itertools import chain, islice

from django.utils import timezone

from .columns import infer_columns
from .conf import export_setting
from .csv_export import iter_csv_lines
from .exceptions import NoData, StreamFailure
from .formatting import format_value
from .layout import plan_layout
from .pagination import TablePaginator
from .pdf import CanvasSurface, TextMeasurer

logger = logging.getLogger(__name__)

CSV = 'csv'
PDF = 'pdf'

CONTENT_TYPES = {
    CSV: 'text/csv',
    PDF: 'application/pdf',
}


def report_title(report_name):
    return f"{report_name[:1].upper()}{report_name[1:]} Report"


@dataclass
class ReportExport:
    """A rendered report ready to be streamed: headers plus an iterator of byte chunks."""
    report_name: str
    format: str
    chunks: object
    rows: int = 0
    pages: int = 0
    bytes_sent: int = field(default=0, init=False)

    @property
    def content_type(self):
        return CONTENT_TYPES[self.format]

    @property
    def filename(self):
        return f"{self.report_name}.{self.format}"

    @property
    def content_disposition(self):
        return f"attachment; filename={self.filename}"

    @property
    def started(self):
        return self.bytes_sent > 0

    def stream(self):
        """
        Yield the output chunks, counting what has gone out.

        Once a byte has been sent the response headers are fixed, so a
        failure after that point is logged and surfaces as StreamFailure
        instead of an error body.
        """
        try:
            for chunk in self.chunks:
                yield chunk
                self.bytes_sent += len(chunk)
        except Exception as exc:
            if not self.started:
                raise
            logger.exception(
                "Report %s failed after %s bytes were sent", self.filename, self.bytes_sent
            )
            raise StreamFailure(f"{self.filename} aborted mid-stream") from exc



def chunked(pieces, size):
    """Re-group an iterable of bytes into chunks of roughly ``size`` bytes."""
    buffer = bytearray()
    for piece in pieces:
        buffer += piece
        if len(buffer) >= size:
            yield bytes(buffer)
            buffer.clear()
    if buffer:
        yield bytes(buffer)


def render(report_name, records, format=PDF, generated_at=None):
    """
    Render ``records`` as a CSV or PDF report.

    Any format other than ``csv`` produces a PDF. Raises NoData before
    anything is produced when there are no records.
    """
    records = iter(records)
    sample = list(islice(records, export_setting('SAMPLE_SIZE')))
    if not sample:
        raise NoData(f"No data found for report {report_name}")

    everything = chain(sample, records)
    if format == CSV:
        return render_csv(report_name, everything)
    return render_pdf(report_name, sample, everything, generated_at=generated_at)


def render_csv(report_name, records):
    lines = (line.encode('utf-8') for line in iter_csv_lines(records))
    logger.info("Streaming CSV report %s", report_name)
    return ReportExport(report_name, CSV, chunked(lines, export_setting('CHUNK_SIZE')))


def file_chunks(handle, size):
    """Read ``handle`` from the start in ``size`` pieces, closing it when done."""
    try:
        handle.seek(0)
        while True:
            chunk = handle.read(size)
            if not chunk:
                break
            yield chunk
    finally:
        handle.close()


def render_pdf(report_name, sample, records, generated_at=None):
    columns = infer_columns(sample)
    if not columns:
        raise NoData(f"No displayable fields for report {report_name}")
    plan = plan_layout(columns)

    if generated_at is None:
        generated_at = timezone.localtime(timezone.now())

    title = report_title(report_name)
    # spills to disk past SPOOL_SIZE so a large report doesn't sit on the heap
    spool = tempfile.SpooledTemporaryFile(max_size=export_setting('SPOOL_SIZE'))
    try:
        surface = CanvasSurface(
            spool,
            plan.page_size,
            [column.label for column in columns],
            plan.column_widths,
            title=title,
        )
        table_top = surface.draw_title_block(title, f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}")

        paginator = TablePaginator(
            surface,
            plan.column_widths,
            TextMeasurer(),
            page_height=surface.page_height,
        )
        paginator.start(table_top + 6)
        for record in records:
            paginator.add_row([format_value(record.get(column.key)) for column in columns])
        paginator.finish()
        surface.save()
    except BaseException:
        spool.close()
        raise

    logger.info(
        "Rendered PDF report %s: %s columns, %s, %s rows on %s pages",
        report_name, len(columns), plan.orientation.value, paginator.rows_drawn, paginator.page_count,
    )

    chunks = file_chunks(spool, export_setting('CHUNK_SIZE'))
    return ReportExport(report_name, PDF, chunks, rows=paginator.rows_drawn, pages=paginator.page_count)
