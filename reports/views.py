# reports/views.py
import logging

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse, StreamingHttpResponse
from django.views.decorators.http import require_GET

from .exceptions import NoData, UnsupportedReportKind
from .renderer import PDF, render
from .sources import fetch_records

logger = logging.getLogger(__name__)


@login_required
@require_GET
def export_report(request, report_type):
    """
    Download a whole record collection as ``?format=pdf`` (default) or
    ``?format=csv``.

    Every failure up to this point becomes a JSON error. After the response
    is returned, bytes start going out and errors can only abort the stream.
    """
    fmt = request.GET.get('format', PDF)

    try:
        records = fetch_records(report_type)
        export = render(report_type, records, fmt)
    except UnsupportedReportKind:
        return JsonResponse({'msg': 'Invalid report type'}, status=400)
    except NoData:
        return JsonResponse({'msg': 'No data found for this report type'}, status=404)
    except Exception as exc:
        logger.exception("Report %s (%s) failed", report_type, fmt)
        return JsonResponse({'msg': 'Server Error', 'error': str(exc)}, status=500)

    response = StreamingHttpResponse(export.stream(), content_type=export.content_type)
    response['Content-Disposition'] = export.content_disposition
    return response
