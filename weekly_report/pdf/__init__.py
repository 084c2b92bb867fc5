from .layout import LAYOUT
from .renderer import ensure_pdf_bytes, render_weekly_report_pdf


__all__ = ["LAYOUT", "ensure_pdf_bytes", "render_weekly_report_pdf"]
