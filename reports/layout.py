# reports/layout.py
from dataclasses import dataclass
from enum import Enum

from reportlab.lib.pagesizes import A4, landscape, portrait

MARGIN_TOP = 56
MARGIN_BOTTOM = 56
MARGIN_LEFT = 48
MARGIN_RIGHT = 48

LANDSCAPE_THRESHOLD = 6
MIN_HEADER_WEIGHT = 6
MIN_COLUMN_WIDTH = 60
MAX_COLUMN_FLOOR = 120


class Orientation(Enum):
    PORTRAIT = 'portrait'
    LANDSCAPE = 'landscape'


@dataclass(frozen=True)
class LayoutPlan:
    orientation: Orientation
    column_widths: tuple
    page_width: float

    @property
    def page_size(self):
        return page_size_for(self.orientation)


def choose_orientation(columns):
    if len(columns) > LANDSCAPE_THRESHOLD:
        return Orientation.LANDSCAPE
    return Orientation.PORTRAIT


def page_size_for(orientation):
    if orientation is Orientation.LANDSCAPE:
        return landscape(A4)
    return portrait(A4)


def usable_width(orientation):
    width, _ = page_size_for(orientation)
    return width - MARGIN_LEFT - MARGIN_RIGHT


def column_weight(column):
    """Header length sets a floor; content length is capped so one verbose field can't starve the rest."""
    header_weight = max(MIN_HEADER_WEIGHT, len(column.label))
    return max(header_weight, column.content_width_hint)


def distribute_widths(weights, page_width):
    """
    Split ``page_width`` proportionally to ``weights``.

    Each width is clamped to [MIN_COLUMN_WIDTH, max(MAX_COLUMN_FLOOR, page_width / 2)]
    and the last column then takes whatever is left, so the widths always
    sum to ``page_width``.
    """
    if not weights:
        return []

    total_weight = sum(weights) or 1
    max_width = max(MAX_COLUMN_FLOOR, page_width / 2)
    widths = [
        max(MIN_COLUMN_WIDTH, min(max_width, weight / total_weight * page_width))
        for weight in weights
    ]
    widths[-1] = page_width - sum(widths[:-1])
    return widths


def plan_layout(columns, page_width=None):
    """Widths come from each column's content hint, already taken from the sample at inference."""
    orientation = choose_orientation(columns)
    if page_width is None:
        page_width = usable_width(orientation)

    weights = [column_weight(column) for column in columns]
    return LayoutPlan(
        orientation=orientation,
        column_widths=tuple(distribute_widths(weights, page_width)),
        page_width=page_width,
    )
