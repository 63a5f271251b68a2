# reports/pdf.py
from reportlab.lib import colors
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from .conf import export_setting
from .layout import MARGIN_BOTTOM, MARGIN_LEFT, MARGIN_RIGHT, MARGIN_TOP
from .pagination import ROW_PADDING_X, ROW_PADDING_Y

THEME = {
    'header_bg': colors.HexColor('#f4f6f8'),
    'zebra_bg': colors.HexColor('#fafafa'),
    'border': colors.HexColor('#dfe3e8'),
    'grid': colors.HexColor('#eceff1'),
    'title': colors.HexColor('#111827'),
    'muted': colors.HexColor('#6b7280'),
}

TITLE_FONT_SIZE = 22
META_FONT_SIZE = 10
HEADER_FONT_SIZE = 10
CELL_FONT_SIZE = 10
FOOTER_FONT_SIZE = 9
LINE_SPACING = 1.2
RULE_WIDTH = 0.5


class TextMeasurer:
    """Wrapped text height for a font, usable as the paginator's ``measure`` callable."""

    def __init__(self, font_name=None, font_size=CELL_FONT_SIZE):
        self.font_name = font_name or export_setting('FONT')
        self.font_size = font_size
        self.leading = font_size * LINE_SPACING

    def width_of(self, text):
        return pdfmetrics.stringWidth(text, self.font_name, self.font_size)

    def lines(self, text, width):
        """Wrap at whitespace, then cut anything still wider than ``width`` by characters."""
        if not text:
            return []
        lines = []
        for line in simpleSplit(text, self.font_name, self.font_size, width):
            lines.extend(self._break_long(line, width))
        return lines

    def _break_long(self, line, width):
        pieces = []
        while len(line) > 1 and self.width_of(line) > width:
            cut = 1
            while cut < len(line) and self.width_of(line[:cut + 1]) <= width:
                cut += 1
            pieces.append(line[:cut])
            line = line[cut:]
        pieces.append(line)
        return pieces

    def __call__(self, text, width):
        return len(self.lines(text, width)) * self.leading


def truncate(text, font_name, font_size, width, ellipsis='…'):
    if pdfmetrics.stringWidth(text, font_name, font_size) <= width:
        return text
    while text and pdfmetrics.stringWidth(text + ellipsis, font_name, font_size) > width:
        text = text[:-1]
    return text + ellipsis if text else ''


class CanvasSurface:
    """
    Draws the report table on a reportlab canvas.

    Callers use top-down coordinates measured from the top edge of the
    page; the conversion to PDF's bottom-up space happens here.
    """

    def __init__(self, output, page_size, labels, column_widths, title=None):
        self.page_width, self.page_height = page_size
        self.labels = list(labels)
        self.column_widths = list(column_widths)
        self.table_left = MARGIN_LEFT
        self.table_width = sum(self.column_widths)
        self.font = export_setting('FONT')
        self.font_bold = export_setting('FONT_BOLD')
        self.measurer = TextMeasurer(self.font, CELL_FONT_SIZE)

        # invariant output: no creation date or random document id in the file
        self.canvas = canvas.Canvas(output, pagesize=page_size, invariant=1, pageCompression=1)
        if title:
            self.canvas.setTitle(title)

    def _pdf_y(self, y):
        return self.page_height - y

    def _baseline(self, top, font_name, font_size):
        return self._pdf_y(top + pdfmetrics.getAscent(font_name, font_size))

    def draw_title_block(self, title, subtitle):
        """Title and generation line, centred above the table. Returns the y below them."""
        c = self.canvas
        center = self.page_width / 2
        y = MARGIN_TOP

        c.setFillColor(THEME['title'])
        c.setFont(self.font_bold, TITLE_FONT_SIZE)
        c.drawCentredString(center, self._baseline(y, self.font_bold, TITLE_FONT_SIZE), title)
        y += TITLE_FONT_SIZE * LINE_SPACING

        c.setFillColor(THEME['muted'])
        c.setFont(self.font, META_FONT_SIZE)
        c.drawCentredString(center, self._baseline(y, self.font, META_FONT_SIZE), subtitle)
        y += META_FONT_SIZE * LINE_SPACING

        # one blank line before the table
        return y + META_FONT_SIZE * LINE_SPACING

    def draw_header(self, y, height):
        c = self.canvas
        c.saveState()
        c.setFillColor(THEME['header_bg'])
        c.rect(self.table_left, self._pdf_y(y + height), self.table_width, height, stroke=0, fill=1)
        self._rule(y + height, THEME['border'])
        c.restoreState()

        c.setFillColor(THEME['title'])
        c.setFont(self.font_bold, HEADER_FONT_SIZE)
        text_top = y + (height - HEADER_FONT_SIZE) / 2 - 1
        x = self.table_left
        for label, width in zip(self.labels, self.column_widths):
            fitted = truncate(label, self.font_bold, HEADER_FONT_SIZE, width - ROW_PADDING_X * 2)
            c.drawString(x + ROW_PADDING_X, self._baseline(text_top, self.font_bold, HEADER_FONT_SIZE), fitted)
            x += width

    def draw_row(self, y, height, texts, shaded):
        c = self.canvas
        if shaded:
            c.saveState()
            c.setFillColor(THEME['zebra_bg'])
            c.rect(self.table_left, self._pdf_y(y + height), self.table_width, height, stroke=0, fill=1)
            c.restoreState()

        self._rule(y + height, THEME['border'])

        c.setFillColor(THEME['title'])
        c.setFont(self.font, CELL_FONT_SIZE)
        x = self.table_left
        for text, width in zip(texts, self.column_widths):
            line_top = y + ROW_PADDING_Y
            for line in self.measurer.lines(text, width - ROW_PADDING_X * 2):
                c.drawString(x + ROW_PADDING_X, self._baseline(line_top, self.font, CELL_FONT_SIZE), line)
                line_top += self.measurer.leading

            c.saveState()
            c.setLineWidth(RULE_WIDTH)
            c.setStrokeColor(THEME['grid'])
            c.line(x + width, self._pdf_y(y), x + width, self._pdf_y(y + height))
            c.restoreState()
            x += width

    def draw_footer(self, page_number):
        c = self.canvas
        c.setFillColor(THEME['muted'])
        c.setFont(self.font, FOOTER_FONT_SIZE)
        top = self.page_height - MARGIN_BOTTOM + 16
        c.drawRightString(
            self.page_width - MARGIN_RIGHT,
            self._baseline(top, self.font, FOOTER_FONT_SIZE),
            f"Page {page_number}",
        )

    def new_page(self):
        self.canvas.showPage()

    def save(self):
        self.canvas.save()

    def _rule(self, y, color):
        c = self.canvas
        c.saveState()
        c.setLineWidth(RULE_WIDTH)
        c.setStrokeColor(color)
        c.line(self.table_left, self._pdf_y(y), self.table_left + self.table_width, self._pdf_y(y))
        c.restoreState()
