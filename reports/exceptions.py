# reports/exceptions.py


class ReportError(Exception):
    """Base class for report export failures."""


class NoData(ReportError):
    """The requested report has no records to render."""


class UnsupportedReportKind(ReportError):
    """The report name does not map to a known record collection."""

    def __init__(self, report_name):
        super().__init__(f"Invalid report type: {report_name}")
        self.report_name = report_name


class MeasurementFailure(ReportError):
    """A cell's wrapped height could not be computed."""


class StreamFailure(ReportError):
    """Output failed after bytes were already sent to the client."""
