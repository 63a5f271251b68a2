# reports/conf.py
from django.conf import settings

DEFAULTS = {
    'SAMPLE_SIZE': 200,
    'CHUNK_SIZE': 8192,
    'SPOOL_SIZE': 1024 * 1024,
    'FONT': 'Helvetica',
    'FONT_BOLD': 'Helvetica-Bold',
}


def export_setting(name):
    """Read a REPORT_EXPORT override from settings, falling back to DEFAULTS."""
    overrides = getattr(settings, 'REPORT_EXPORT', None) or {}
    return overrides.get(name, DEFAULTS[name])
