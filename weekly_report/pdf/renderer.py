import io
import logging
import re
from datetime import date
from typing import Sequence, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.platypus import KeepInFrame, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..reports.errors import EmptyRenderOutputError
from ..reports.models import DayRecord, WeeklyReportPayload
from ..reports.weeks import weekday_kanji
from .layout import LAYOUT


logger = logging.getLogger(__name__)

FONT_NAME = "HeiseiKakuGo-W5"
WEEKDAY_IN_LABEL = re.compile(r"[（(]([日月火水木金土])[)）]")

pdfmetrics.registerFont(UnicodeCIDFont(FONT_NAME))
# the CID font has no bold face; <b> maps back onto it
pdfmetrics.registerFontFamily(FONT_NAME, normal=FONT_NAME, bold=FONT_NAME, italic=FONT_NAME, boldItalic=FONT_NAME)


def _style(name: str, font_size: float, leading: float, alignment: int = TA_LEFT, **kwargs) -> ParagraphStyle:
    return ParagraphStyle(
        name,
        fontName=FONT_NAME,
        fontSize=font_size,
        leading=font_size * leading,
        alignment=alignment,
        wordWrap="CJK",
        **kwargs,
    )


STYLES = {
    "title": _style(
        "title",
        LAYOUT.title.font_size,
        LAYOUT.title.leading,
        TA_CENTER,
        spaceAfter=LAYOUT.title.margin_bottom,
    ),
    "body": _style("body", LAYOUT.body.font_size, LAYOUT.body.leading),
    "indent": _style("indent", LAYOUT.body.font_size, LAYOUT.body.leading, leftIndent=12, spaceAfter=3),
    "section": _style(
        "section",
        LAYOUT.section_title.font_size,
        LAYOUT.section_title.leading,
        spaceAfter=LAYOUT.section_title.margin_bottom,
    ),
    "header": _style("header", LAYOUT.table_header.font_size, LAYOUT.table_header.leading, TA_CENTER),
    "cell": _style("cell", LAYOUT.cell_text.font_size, LAYOUT.cell_text.leading, TA_CENTER),
    "content": _style("content", LAYOUT.content_text.font_size, LAYOUT.content_text.leading),
}

PREV_HEADERS = ("日付", "曜日", "大学滞在\n時間帯", "時間\n(h)", "研究内容")
CURRENT_HEADERS = ("日付", "曜日", "大学滞在予定\n時間帯", "時間\n(h)", "研究内容")


def _text(value: str, style: str = "body") -> Paragraph:
    return Paragraph(escape(value).replace("\n", "<br/>"), STYLES[style])


def _labelled(label: str, value: str = "") -> Paragraph:
    return Paragraph(f"<b>{escape(label)}</b>：{escape(value)}", STYLES["body"])


def extract_weekday(date_label: str) -> str:
    match = WEEKDAY_IN_LABEL.search(date_label)
    if match:
        return match.group(1)
    try:
        return weekday_kanji(date.fromisoformat(date_label.split(" ")[0]))
    except ValueError:
        return ""


def to_date_text(date_label: str) -> str:
    """'2025-04-07 (月)' -> '04/07'"""
    try:
        day = date.fromisoformat(date_label.split(" ")[0])
    except ValueError:
        return ""
    return f"{day:%m/%d}"


def format_stay_range(record: DayRecord) -> str:
    if record.stay_start and record.stay_end and record.break_start and record.break_end:
        return f"{record.stay_start}〜{record.break_start}\n{record.break_end}〜{record.stay_end}"
    if record.stay_start and record.stay_end:
        return f"{record.stay_start}〜{record.stay_end}"
    return ""


def format_hours(minutes: int) -> str:
    """Hours with one decimal, rounding half up; empty for zero"""
    if not minutes:
        return ""
    tenths = (minutes * 10 + 30) // 60
    return f"{tenths // 10}.{tenths % 10}"


def _week_table(rows: Sequence[DayRecord], headers: Sequence[str]) -> Table:
    columns = LAYOUT.columns
    content_width = LAYOUT.column_width - 2 * LAYOUT.section_padding - columns.fixed_width
    data = [[_text(header, "header") for header in headers]]
    for row in rows:
        data.append(
            [
                _text(to_date_text(row.date), "cell"),
                _text(extract_weekday(row.date), "cell"),
                _text(format_stay_range(row), "cell"),
                _text(format_hours(row.minutes), "cell"),
                _text(row.content, "content"),
            ]
        )

    header_height = (
        LAYOUT.table_header.font_size * LAYOUT.table_header.leading * 2
        + 2 * LAYOUT.table_header_padding
    )
    table = Table(
        data,
        colWidths=[columns.date, columns.weekday, columns.time_range, columns.hours, content_width],
        rowHeights=[header_height] + [LAYOUT.table_row_height] * len(rows),
    )
    table.setStyle(
        TableStyle(
            [
                ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#f5f5f5")),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ("LEFTPADDING", (0, 0), (-1, -1), 4),
                ("RIGHTPADDING", (0, 0), (-1, -1), 4),
            ]
        )
    )
    return table


def _prev_week_section(payload: WeeklyReportPayload) -> list:
    return [
        _text(f"前週（{payload.prev_week_label}）", "section"),
        Spacer(1, LAYOUT.table_margin_top),
        _week_table(payload.prev_week_days, PREV_HEADERS),
        Spacer(1, LAYOUT.table_margin_bottom),
        _text("前週の振り返り（達成度・達成点・課題）", "section"),
        _labelled("前週の目標達成度", f"{payload.prev_goal_result_percent}%"),
        _labelled("●研究活動での達成点"),
        _text(payload.achieved_points, "indent"),
        _labelled("●研究活動実施上の課題・問題点・反省点等"),
        _text(payload.issues, "indent"),
    ]


def _current_week_section(payload: WeeklyReportPayload) -> list:
    return [
        _text(f"今週（{payload.current_week_label}）", "section"),
        Spacer(1, LAYOUT.table_margin_top),
        _week_table(payload.current_week_days, CURRENT_HEADERS),
        Spacer(1, LAYOUT.table_margin_bottom),
        _text("今週の備考（配慮事項など）", "section"),
        _labelled("備考（行動上配慮すべき内容）"),
        _text(payload.notes, "indent"),
        _labelled("連絡内容（教員記述欄）"),
    ]


def _top_row(payload: WeeklyReportPayload) -> Table:
    left = [
        _labelled("氏名", payload.name),
        _labelled("前週の研究報告", f"{payload.total_prev_hours_rounded} 時間（大学での滞在時間）"),
        _labelled("前週の研究達成目標"),
        _text(payload.prev_goal, "indent"),
    ]
    right = [
        _labelled("今週の研究予定"),
        _labelled("研究達成目標（出来る限り数値目標）"),
        _text(payload.current_goal, "indent"),
    ]
    half = LAYOUT.usable_width / 2
    table = Table([[left, right]], colWidths=[half, half])
    table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
    return table


def build_story(payload: WeeklyReportPayload) -> list:
    grid = Table(
        [[_prev_week_section(payload), _current_week_section(payload)]],
        colWidths=[LAYOUT.column_width + LAYOUT.grid_gap / 2] * 2,
    )
    grid.setStyle(
        TableStyle(
            [
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("LEFTPADDING", (0, 0), (-1, -1), LAYOUT.section_padding),
                ("RIGHTPADDING", (0, 0), (-1, -1), LAYOUT.section_padding),
            ]
        )
    )
    return [
        _text(f"研究室・週報（{payload.year_label}年度）", "title"),
        _top_row(payload),
        Spacer(1, LAYOUT.top_row_margin_bottom),
        grid,
    ]


def ensure_pdf_bytes(output: Union[bytes, bytearray, memoryview]) -> bytes:
    """Normalize renderer output, rejecting anything that is not a byte buffer"""
    if isinstance(output, memoryview):
        output = output.tobytes()
    if not isinstance(output, (bytes, bytearray)):
        raise TypeError(f"Unexpected PDF output type: {type(output).__name__}")
    if not output:
        raise EmptyRenderOutputError("Renderer produced an empty document")
    return bytes(output)


def render_weekly_report_pdf(payload: WeeklyReportPayload) -> bytes:
    """Render the report as a single A4 page"""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        topMargin=LAYOUT.padding_top,
        bottomMargin=LAYOUT.padding_bottom,
        leftMargin=LAYOUT.padding_horizontal,
        rightMargin=LAYOUT.padding_horizontal,
        title=f"週報 {payload.name} {payload.submission_date}",
    )
    # scale down rather than spill onto a second page
    doc.build([KeepInFrame(0, 0, build_story(payload), mode="shrink")])
    logger.info(f"Rendered weekly report for {payload.name} ({payload.submission_date})")
    return ensure_pdf_bytes(buffer.getvalue())
