class RecordingSurface:
    """Drawing surface that remembers calls instead of painting them."""

    def __init__(self):
        self.calls = []
        self.page = 1
        self.rows = []

    def draw_header(self, y, height):
        self.calls.append(('header', self.page, y))

    def draw_row(self, y, height, texts, shaded):
        self.rows.append({'page': self.page, 'y': y, 'height': height, 'texts': texts, 'shaded': shaded})
        self.calls.append(('row', self.page, y))

    def draw_footer(self, page_number):
        self.calls.append(('footer', page_number))

    def new_page(self):
        self.page += 1
        self.calls.append(('new_page', self.page))

    def footers(self):
        return [call[1] for call in self.calls if call[0] == 'footer']


def linear_measure(line_height=12, char_width=6):
    """Fake measurer: one line per ``width // char_width`` characters."""
    def measure(text, width):
        if not text:
            return 0
        per_line = max(1, int(width // char_width))
        lines = -(-len(text) // per_line)
        return lines * line_height
    return measure


def make_records(count, fields=8):
    return [
        {'_id': index, **{f"field{n}": f"value {index}-{n}" for n in range(fields)}}
        for index in range(count)
    ]
