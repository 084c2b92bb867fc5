"""Layout constants shared by the renderer and the page budget test (points)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextBlock:
    font_size: float
    margin_bottom: float = 0
    leading: float = 1.3


@dataclass(frozen=True)
class Columns:
    date: float = 32
    weekday: float = 24
    time_range: float = 60
    hours: float = 24

    @property
    def fixed_width(self) -> float:
        return self.date + self.weekday + self.time_range + self.hours


@dataclass(frozen=True)
class Layout:
    page_width: float = 595.27  # A4 portrait
    page_height: float = 841.89
    padding_top: float = 26
    padding_bottom: float = 18
    padding_horizontal: float = 20
    body: TextBlock = TextBlock(font_size=9)
    title: TextBlock = TextBlock(font_size=14, margin_bottom=10)
    top_row_margin_bottom: float = 10
    top_row_estimated_height: float = 70
    grid_gap: float = 12
    section_padding: float = 5
    section_title: TextBlock = TextBlock(font_size=10, margin_bottom=8)
    table_margin_top: float = 4
    table_margin_bottom: float = 8
    table_header: TextBlock = TextBlock(font_size=8, leading=1.1)
    table_header_padding: float = 4
    table_row_height: float = 36
    cell_text: TextBlock = TextBlock(font_size=9, leading=1.25)
    content_text: TextBlock = TextBlock(font_size=8, leading=1.2)
    footer_margin_top: float = 6
    footer_line_count: int = 3
    columns: Columns = Columns()

    @property
    def usable_width(self) -> float:
        return self.page_width - 2 * self.padding_horizontal

    @property
    def usable_height(self) -> float:
        return self.page_height - self.padding_top - self.padding_bottom

    @property
    def column_width(self) -> float:
        return (self.usable_width - self.grid_gap) / 2


LAYOUT = Layout()
