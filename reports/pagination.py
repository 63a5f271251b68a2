# reports/pagination.py
"""
Row-at-a-time table pagination.

The paginator owns the page cursor and decides when a page is full. All
drawing goes through a *surface* object and all text measurement through
a ``measure(text, width) -> height`` callable, so the page-break logic can
be exercised without a PDF back end.

A surface provides:

    draw_header(y, height)                  header band with column labels
    draw_row(y, height, texts, shaded)      one table row
    draw_footer(page_number)                page number for the current page
    new_page()                              finish the current page, start the next
"""
import logging
from dataclasses import dataclass
from enum import Enum

from .exceptions import MeasurementFailure
from .layout import MARGIN_BOTTOM, MARGIN_TOP

logger = logging.getLogger(__name__)

HEADER_HEIGHT = 24
ROW_PADDING_X = 6
ROW_PADDING_Y = 6
MIN_ROW_HEIGHT = 16
FOOTER_RESERVE = 30


class State(Enum):
    HEADER_DRAWN = 'header_drawn'
    ROWS_STREAMING = 'rows_streaming'
    FINISHED = 'finished'


@dataclass
class PageCursor:
    y: float
    page_number: int = 1


class TablePaginator:

    def __init__(self, surface, column_widths, measure, page_height,
                 margin_top=MARGIN_TOP, margin_bottom=MARGIN_BOTTOM):
        self.surface = surface
        self.column_widths = list(column_widths)
        self.measure = measure
        self.page_height = page_height
        self.margin_top = margin_top
        self.margin_bottom = margin_bottom

        self.cursor = None
        self.state = None
        self.rows_drawn = 0
        self.rows_per_page = []

    @property
    def max_y(self):
        return self.page_height - self.margin_bottom - FOOTER_RESERVE

    @property
    def page_count(self):
        return self.cursor.page_number if self.cursor else 0

    def start(self, y):
        """Draw the first header band at ``y``; the title block is already on the page."""
        if self.state is not None:
            raise RuntimeError("Paginator already started")
        self.cursor = PageCursor(y=y)
        self._draw_header()
        self.rows_per_page.append(0)

    def row_height(self, texts):
        tallest = 0
        for text, width in zip(texts, self.column_widths):
            cell_width = width - ROW_PADDING_X * 2
            try:
                height = self.measure(text, cell_width)
            except Exception as exc:
                raise MeasurementFailure(
                    f"Could not measure cell text of length {len(text)} at width {cell_width}"
                ) from exc
            tallest = max(tallest, height)
        return max(MIN_ROW_HEIGHT, tallest + ROW_PADDING_Y * 2)

    def add_row(self, texts):
        if self.state not in (State.HEADER_DRAWN, State.ROWS_STREAMING):
            raise RuntimeError(f"Cannot add rows in state {self.state}")

        height = self.row_height(texts)
        if self.cursor.y + height > self.max_y:
            self._break_page()

        # stripe parity follows the global row index, not the row's position on its page
        shaded = self.rows_drawn % 2 == 0
        self.surface.draw_row(self.cursor.y, height, texts, shaded)

        self.cursor.y += height
        self.rows_drawn += 1
        self.rows_per_page[-1] += 1
        self.state = State.ROWS_STREAMING

    def finish(self):
        if self.state is State.FINISHED:
            return
        self.surface.draw_footer(self.cursor.page_number)
        self.state = State.FINISHED
        logger.debug("Table finished: %s rows on %s pages", self.rows_drawn, self.page_count)

    def _break_page(self):
        self.surface.draw_footer(self.cursor.page_number)
        self.surface.new_page()
        self.cursor = PageCursor(y=self.margin_top, page_number=self.cursor.page_number + 1)
        self._draw_header()
        self.rows_per_page.append(0)

    def _draw_header(self):
        self.surface.draw_header(self.cursor.y, HEADER_HEIGHT)
        self.cursor.y += HEADER_HEIGHT
        self.state = State.HEADER_DRAWN
