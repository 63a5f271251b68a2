import logging
from io import BytesIO
from xml.sax.saxutils import escape

from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

from accounts.models import User
from academics.models import Result
# PDF Generation imports
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from .utils import summarize_results, display_or_na

logger = logging.getLogger(__name__)


def build_result_slip(student, results, generated_at=None):
    """Lay out a one-student result slip and return the PDF bytes."""
    generated_at = generated_at or timezone.localtime(timezone.now())
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        topMargin=56,
        bottomMargin=56,
        leftMargin=48,
        rightMargin=48,
        title=f"Result Slip - {student.name}",
        invariant=1,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'SlipTitle',
        parent=styles['Heading1'],
        fontSize=20,
        alignment=TA_CENTER,
        fontName='Helvetica-Bold',
        spaceAfter=6,
    )
    subtitle_style = ParagraphStyle(
        'SlipSubtitle',
        parent=styles['Normal'],
        fontSize=12,
        alignment=TA_CENTER,
        textColor=colors.HexColor('#666666'),
        spaceAfter=18,
    )
    section_style = ParagraphStyle(
        'SlipSection',
        parent=styles['Heading2'],
        fontSize=14,
        fontName='Helvetica-Bold',
        spaceAfter=4,
    )
    body_style = ParagraphStyle('SlipBody', parent=styles['Normal'], fontSize=11, leading=14)
    footer_style = ParagraphStyle(
        'SlipFooter',
        parent=styles['Normal'],
        fontSize=9,
        alignment=TA_CENTER,
        textColor=colors.HexColor('#666666'),
    )

    elements = [
        Paragraph("RESULT SLIP", title_style),
        Paragraph("Academic Performance Report", subtitle_style),
    ]

    # =========================
    # STUDENT INFORMATION
    # =========================
    elements.append(Paragraph("Student Information", section_style))
    info_lines = [
        f"Name: {display_or_na(student.name)}",
        f"Student ID: {student.pk}",
        f"Grade: {display_or_na(student.grade)}",
        f"Section: {display_or_na(student.section)}",
        f"Email: {display_or_na(student.email)}",
    ]
    if student.parent:
        info_lines.append(
            f"Parent: {display_or_na(student.parent.name)} ({display_or_na(student.parent.email)})"
        )
    for line in info_lines:
        elements.append(Paragraph(escape(line), body_style))
    elements.append(Spacer(1, 14))

    # =========================
    # RESULTS TABLE
    # =========================
    elements.append(Paragraph("Academic Results", section_style))
    table_data = [["Subject", "Exam", "Score", "Grade"]]
    for result in results:
        table_data.append([
            display_or_na(result.subject),
            display_or_na(result.exam),
            str(result.score) if result.score is not None else 'N/A',
            display_or_na(result.grade),
        ])

    results_table = Table(table_data, colWidths=[120, 120, 80, 80], repeatRows=1)
    results_table.setStyle(TableStyle([
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
        ('FONTSIZE', (0, 0), (-1, -1), 10),
        ('LINEBELOW', (0, 0), (-1, 0), 1, colors.black),
        ('LINEBELOW', (0, -1), (-1, -1), 1, colors.black),
        ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.HexColor('#f8f8f8'), colors.white]),
        ('TOPPADDING', (0, 0), (-1, -1), 5),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 5),
    ]))
    elements.append(results_table)
    elements.append(Spacer(1, 24))

    # =========================
    # SUMMARY
    # =========================
    summary = summarize_results(results)
    elements.append(Paragraph("Summary", section_style))
    elements.append(Paragraph(f"Total Subjects: {summary['total_subjects']}", body_style))
    elements.append(Paragraph(f"Total Score: {summary['total_score']}", body_style))
    elements.append(Paragraph(f"Average Score: {summary['average_score']}%", body_style))
    elements.append(Spacer(1, 24))

    elements.append(Paragraph(
        f"Generated on: {generated_at:%Y-%m-%d} at {generated_at:%H:%M:%S}", footer_style
    ))
    elements.append(Paragraph("This is a system-generated document.", footer_style))

    doc.build(elements)
    pdf = buffer.getvalue()
    buffer.close()
    return pdf


@login_required
@require_GET
def download_result_slip(request, student_id):
    student = (
        User.objects.select_related('parent')
        .filter(pk=student_id, role='student')
        .first()
    )
    if student is None:
        return JsonResponse({'msg': 'Student not found'}, status=404)

    # parents only get their own child's slip
    if request.user.role == 'parent' and student.parent_id != request.user.pk:
        return JsonResponse(
            {'msg': "Access denied: You can only download your own child's result slip"},
            status=403,
        )

    results = list(Result.objects.filter(student_id=str(student.pk)))
    if not results:
        return JsonResponse({'msg': 'No results found for this student'}, status=404)

    try:
        pdf = build_result_slip(student, results)
    except Exception as exc:
        logger.exception("Error generating result slip for student %s", student.pk)
        return JsonResponse({'msg': 'Server Error', 'error': str(exc)}, status=500)

    response = HttpResponse(pdf, content_type='application/pdf')
    response['Content-Disposition'] = (
        f'attachment; filename="result-slip-{student.name or student.pk}.pdf"'
    )
    return response
