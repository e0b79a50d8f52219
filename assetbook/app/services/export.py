from __future__ import annotations

import io
import logging
import re
from datetime import date
from typing import Iterable, List, Sequence

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..schemas.asset import RegisterRow
from ..schemas.depreciation import ScheduleEntry

logger = logging.getLogger(__name__)

SCHEDULE_HEADER_COLOUR = colors.Color(22 / 255, 160 / 255, 133 / 255)
REGISTER_HEADER_COLOUR = colors.Color(41 / 255, 128 / 255, 185 / 255)

METHOD_LABELS = {
    "straight_line": "Straight-Line",
    "declining_balance": "Declining Balance",
}


def _money(value: float) -> str:
    return f"{value:.2f}"


def export_filename(asset_name: str, extension: str) -> str:
    """``"Delivery Van"`` -> ``"Delivery_Van_depreciation_schedule.csv"``."""
    stem = re.sub(r"\s+", "_", asset_name)
    return f"{stem}_depreciation_schedule.{extension}"


def schedule_columns(currency: str) -> List[str]:
    return [
        "Year",
        f"Depreciation ({currency})",
        f"Accumulated Depreciation ({currency})",
        f"Book Value ({currency})",
    ]


def register_columns(currency: str) -> List[str]:
    return [
        "Asset Name",
        "Type",
        f"Purchase Cost ({currency})",
        "Purchase Date",
        "Useful Life",
        "Method",
        f"Current NBV ({currency})",
    ]


def _schedule_rows(schedule: Iterable[ScheduleEntry]) -> List[List[str]]:
    return [
        [
            str(entry.year),
            _money(entry.depreciation),
            _money(entry.accumulated),
            _money(entry.book_value),
        ]
        for entry in schedule
    ]


def _register_rows(rows: Iterable[RegisterRow]) -> List[List[str]]:
    return [
        [
            row.name,
            row.category,
            _money(row.cost),
            row.purchase_date.isoformat(),
            str(row.useful_life),
            METHOD_LABELS.get(row.method, row.method),
            _money(row.current_book_value),
        ]
        for row in rows
    ]


def _to_csv(columns: Sequence[str], rows: List[List[str]]) -> str:
    frame = pd.DataFrame(rows, columns=list(columns))
    return frame.to_csv(index=False, lineterminator="\n")


def _to_pdf(
    title: str,
    generated_on: date,
    columns: Sequence[str],
    rows: List[List[str]],
    header_colour: colors.Color,
) -> bytes:
    buffer = io.BytesIO()
    document = SimpleDocTemplate(buffer, pagesize=A4, title=title)
    styles = getSampleStyleSheet()

    table = Table([list(columns)] + rows, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), header_colour),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTSIZE", (0, 0), (-1, -1), 8),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
            ]
        )
    )

    document.build(
        [
            Paragraph(title, styles["Title"]),
            Paragraph(f"Generated on: {generated_on.isoformat()}", styles["Normal"]),
            Spacer(1, 12),
            table,
        ]
    )
    return buffer.getvalue()


def schedule_to_csv(schedule: Sequence[ScheduleEntry], currency: str = "NGN") -> str:
    """One row per schedule entry, money formatted to two decimals."""
    return _to_csv(schedule_columns(currency), _schedule_rows(schedule))


def schedule_to_pdf(
    schedule: Sequence[ScheduleEntry],
    asset_name: str,
    generated_on: date,
    currency: str = "NGN",
) -> bytes:
    content = _to_pdf(
        f"Depreciation Schedule: {asset_name}",
        generated_on,
        schedule_columns(currency),
        _schedule_rows(schedule),
        SCHEDULE_HEADER_COLOUR,
    )
    logger.info("Rendered %d-row schedule PDF for %s", len(schedule), asset_name)
    return content


def register_to_csv(rows: Sequence[RegisterRow], currency: str = "NGN") -> str:
    return _to_csv(register_columns(currency), _register_rows(rows))


def register_to_pdf(rows: Sequence[RegisterRow], generated_on: date, currency: str = "NGN") -> bytes:
    content = _to_pdf(
        "Asset Register",
        generated_on,
        register_columns(currency),
        _register_rows(rows),
        REGISTER_HEADER_COLOUR,
    )
    logger.info("Rendered register PDF with %d assets", len(rows))
    return content
